# topmark:header:start
#
#   project      : DiagTag
#   file         : kinds.py
#   file_relpath : src/diagtag/diagnostic/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic kinds.

The kind of a diagnostic decides the label shown in the tag (``[Bug]``,
``[Wrong Usage]``, ...), the color of that label, and whether the project tag
carries the version.
"""

from __future__ import annotations

from enum import Enum

from diagtag.rendering.colored_enum import ColorName


class DiagnosticKind(str, Enum):
    """Closed set of diagnostic kinds; the value is the label shown in the tag.

    Only ``BUG`` uses the versioned project tag, so that bug reports always tell
    maintainers which release they came from.
    """

    BUG = "Bug"
    WRONG_USAGE = "Wrong Usage"
    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"

    @property
    def color(self) -> ColorName:
        """Return the color the ``[Kind]`` label is rendered in."""
        if self is DiagnosticKind.INFO:
            return ColorName.BLUE
        if self is DiagnosticKind.WARNING:
            return ColorName.YELLOW
        return ColorName.RED

    @property
    def label(self) -> str:
        """Return the bracketed label, e.g. ``[Wrong Usage]``."""
        return f"[{self.value}]"

    @property
    def versioned(self) -> bool:
        """Return True if messages of this kind use the versioned project tag."""
        return self is DiagnosticKind.BUG
