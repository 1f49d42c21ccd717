# topmark:header:start
#
#   project      : DiagTag
#   file         : __init__.py
#   file_relpath : src/diagtag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagTag package.

DiagTag is a process-wide diagnostic-reporting facility for Python libraries. It
raises tagged bug and usage errors, routes deduplicated warnings and info messages
to a pluggable logger, and recognizes its own tagged messages when they come back
as caught errors.

Typical usage:
    ```python
    from diagtag import report_bug, report_usage_error, report_warning

    def resize(width: int) -> None:
        report_usage_error(width > 0, "`width` must be a positive integer")
        report_warning(width < 10_000, "Very large width, rendering may be slow")
        ...
    ```
"""

from __future__ import annotations

from diagtag.config.project import ProjectInfo
from diagtag.diagnostic.codec import DecodedMessage, encode_message
from diagtag.diagnostic.emitter import (
    DiagnosticEmitter,
    build_project_error,
    decode_error,
    get_emitter,
    has_ever_logged,
    register_pre_log_hook,
    report_bug,
    report_info,
    report_usage_error,
    report_warning,
    set_colorer,
    set_logger,
)
from diagtag.diagnostic.errors import (
    BugError,
    DiagnosticError,
    DiagnosticWarning,
    ProjectError,
    UsageError,
)
from diagtag.diagnostic.kinds import DiagnosticKind
from diagtag.diagnostic.state import DiagnosticState, get_global_state
from diagtag.rendering.color import ColorMode, chalk_colorer, identity_colorer, select_colorer

__all__ = [
    "BugError",
    "ColorMode",
    "DecodedMessage",
    "DiagnosticEmitter",
    "DiagnosticError",
    "DiagnosticKind",
    "DiagnosticState",
    "DiagnosticWarning",
    "ProjectError",
    "ProjectInfo",
    "UsageError",
    "build_project_error",
    "chalk_colorer",
    "decode_error",
    "encode_message",
    "get_emitter",
    "get_global_state",
    "has_ever_logged",
    "identity_colorer",
    "register_pre_log_hook",
    "report_bug",
    "report_info",
    "report_usage_error",
    "report_warning",
    "select_colorer",
    "set_colorer",
    "set_logger",
]
