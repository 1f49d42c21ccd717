# topmark:header:start
#
#   project      : DiagTag
#   file         : errors.py
#   file_relpath : src/diagtag/diagnostic/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised (or built) by the diagnostic emitter.

Usage:
    - `BugError`: internal invariant violated; raised by ``report_bug``.
    - `UsageError`: caller contract violated; raised by ``report_usage_error``.
    - `ProjectError`: built by ``build_project_error``; the caller decides whether to raise it.
    - `DiagnosticWarning`: carrier for warnings logged with a stack trace; never raised.

Clean stacks:
    Every error built by the emitter carries a ``stack`` string captured at construction
    time, with the emitter's own frames removed so the innermost frame is the code that
    reported the diagnostic. Unlike ``__traceback__``, ``stack`` survives pickling, so
    the trace can be shown after the error crossed a process boundary.
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, ClassVar, TypeVar

from diagtag.constants import TRACEBACK_HEADER
from diagtag.diagnostic.kinds import DiagnosticKind

if TYPE_CHECKING:
    from traceback import FrameSummary

_E = TypeVar("_E", bound="DiagnosticError")


class DiagnosticError(Exception):
    """Base class for all DiagTag diagnostic errors.

    Attributes:
        message (str): The full tagged message.
        stack (str): The clean stack captured at construction time (may be empty).
        kind (DiagnosticKind): Kind whose label tags the message; set by each subclass.
    """

    kind: ClassVar[DiagnosticKind]

    def __init__(self, message: str, stack: str = "") -> None:
        super().__init__(message)
        self.message: str = message
        self.stack: str = stack

    def __reduce__(self) -> tuple[type[DiagnosticError], tuple[str, str]]:
        return (type(self), (self.message, self.stack))

    def render(self) -> str:
        """Return the error rendered like a Python traceback, message last."""
        return f"{self.stack}{type(self).__name__}: {self.message}"


class BugError(DiagnosticError):
    """An internal invariant of the reporting library was violated."""

    kind = DiagnosticKind.BUG


class UsageError(DiagnosticError):
    """The reporting library was called in a way its contract forbids."""

    kind = DiagnosticKind.WRONG_USAGE


class ProjectError(DiagnosticError):
    """An error detected deep in a call stack, raised at a point chosen by the caller."""

    kind = DiagnosticKind.ERROR


class DiagnosticWarning(DiagnosticError):
    """Carries a warning and its stack to the logger; never raised by DiagTag."""

    kind = DiagnosticKind.WARNING


def create_error_with_clean_stack(
    error_cls: type[_E],
    message: str,
    *,
    frames_to_remove: int,
) -> _E:
    """Build ``error_cls(message)`` with a stack that skips internal frames.

    The current stack is captured, this helper's own frame is dropped, and so are the
    ``frames_to_remove`` innermost frames above it (the wrappers that called this helper).

    Args:
        error_cls (type[_E]): The `DiagnosticError` subclass to instantiate.
        message (str): The tagged message.
        frames_to_remove (int): Number of wrapper frames to drop.

    Returns:
        _E: The error, not raised.
    """
    frames: list[FrameSummary] = list(traceback.extract_stack())
    kept: list[FrameSummary] = frames[: max(len(frames) - (frames_to_remove + 1), 0)]
    stack: str = "".join([f"{TRACEBACK_HEADER}\n", *traceback.format_list(kept)])
    return error_cls(message, stack)
