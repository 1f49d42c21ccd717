# topmark:header:start
#
#   project      : DiagTag
#   file         : constants.py
#   file_relpath : src/diagtag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagTag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DIAGTAG_PACKAGE_NAME: str = "diagtag"
DIAGTAG_PROJECT_NAME: str = "DiagTag"
DIAGTAG_VERSION: str = get_version(DIAGTAG_PACKAGE_NAME)
DIAGTAG_REPOSITORY: str = "https://github.com/shutterfreak/diagtag"

# Characters that delimit a project tag such as ``[diagtag@0.3.0]``:
TAG_DELIMITERS: frozenset[str] = frozenset("[]@")

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "DIAGTAG_LOG_LEVEL"

# Header line Python prints before a rendered traceback:
TRACEBACK_HEADER: str = "Traceback (most recent call last):"
