# topmark:header:start
#
#   project      : DiagTag
#   file         : types.py
#   file_relpath : src/diagtag/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for DiagTag diagnostics.

This module defines the structural interfaces of the two plug points held by the
diagnostic state: the *logger* receiving non-halting diagnostics and the *colorer*
decorating the ``[Kind]`` part of every tagged message.
"""

from __future__ import annotations

from typing import Literal, Protocol

LogType = Literal["warn", "info"]
"""Severity passed to a [`Logger`][diagtag.diagnostic.types.Logger]."""


class Logger(Protocol):
    """Receives non-halting diagnostics.

    ``message`` is either the tagged message or, for warnings reported with
    ``show_stack_trace=True``, a (never raised) exception carrying it.
    """

    def __call__(self, message: str | BaseException, log_type: LogType, /) -> None:
        """Emit ``message`` with severity ``log_type``."""
        ...


class Colorer(Protocol):
    """Decorates ``text`` with the color named ``color`` (red, blue or yellow)."""

    def __call__(self, text: str, color: str, /) -> str:
        """Return the decorated text."""
        ...
