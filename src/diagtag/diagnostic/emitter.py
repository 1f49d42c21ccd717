# topmark:header:start
#
#   project      : DiagTag
#   file         : emitter.py
#   file_relpath : src/diagtag/diagnostic/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic emitter: condition-gated bugs, usage errors, warnings and info.

Every ``report_*`` operation takes a condition first and does nothing at all (no state
change, no hook, no logger call) when the condition is truthy. When it is falsy:

    - ``report_bug`` / ``report_usage_error`` raise a tagged `BugError` / `UsageError`.
      They only return when the condition held, so code after the call may rely on it.
    - ``report_warning`` / ``report_info`` hand the tagged message to the state's logger,
      at most once per dedup key unless told otherwise.

``build_project_error`` is not condition-gated: it returns a tagged `ProjectError` for
the caller to raise when it sees fit.

A [`DiagnosticEmitter`][diagtag.diagnostic.emitter.DiagnosticEmitter] binds a
[`DiagnosticState`][diagtag.diagnostic.state.DiagnosticState] to a
[`ProjectInfo`][diagtag.config.project.ProjectInfo]. Host libraries create their own
emitter for their project; the module-level functions below are bound to the
process-wide emitter returned by [`get_emitter`][diagtag.diagnostic.emitter.get_emitter].
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final, TypeVar

from diagtag.config.logging import get_logger
from diagtag.config.project import ProjectInfo
from diagtag.diagnostic.codec import decode_error as _decode_error
from diagtag.diagnostic.codec import encode_message
from diagtag.diagnostic.errors import (
    BugError,
    DiagnosticError,
    DiagnosticWarning,
    ProjectError,
    UsageError,
    create_error_with_clean_stack,
)
from diagtag.diagnostic.kinds import DiagnosticKind
from diagtag.diagnostic.state import DiagnosticState, get_global_state

if TYPE_CHECKING:
    from collections.abc import Callable

    from diagtag.config.logging import DiagtagLogger
    from diagtag.diagnostic.codec import DecodedMessage
    from diagtag.diagnostic.types import Colorer, Logger


logger: DiagtagLogger = get_logger(__name__)

# Frames between the caller and the error helper when going through the module-level
# functions: the emitter method and the module-level wrapper.
_FACADE_STACKLEVEL: Final[int] = 2

_E = TypeVar("_E", bound=DiagnosticError)


def _serialize_debug_info(debug_info: object) -> str:
    """Render a debug payload: strings verbatim, anything else as JSON between backticks.

    Payloads JSON cannot encode (non-string keys, circular references) fall back to
    their ``repr``, so that serializing never replaces the bug being reported.
    """
    if isinstance(debug_info, str):
        return debug_info
    try:
        return f"`{json.dumps(debug_info, default=str)}`"
    except (TypeError, ValueError):
        return f"`{debug_info!r}`"


def _describe_callable(fn: object) -> str:
    module: str | None = getattr(fn, "__module__", None)
    name: str = getattr(fn, "__qualname__", None) or type(fn).__name__
    return f"{module}.{name}" if module else name


class DiagnosticEmitter:
    """Reports diagnostics for one project on top of a diagnostic state.

    Args:
        state (DiagnosticState | None): The state to read and update. Defaults to the
            process-wide state.
        project (ProjectInfo | None): The project tagging the messages. Defaults to
            DiagTag itself.

    Attributes:
        state (DiagnosticState): The shared diagnostic state.
        project (ProjectInfo): The project tagging the messages.
    """

    state: DiagnosticState
    project: ProjectInfo

    def __init__(
        self,
        state: DiagnosticState | None = None,
        *,
        project: ProjectInfo | None = None,
    ) -> None:
        self.state = state if state is not None else get_global_state()
        self.project = project if project is not None else ProjectInfo.default()

    def _tag(self, kind: DiagnosticKind, message: str) -> str:
        # The colorer is looked up on every call so that swaps take effect immediately
        return encode_message(kind, message, project=self.project, colorer=self.state.colorer)

    def _bug_message(self, debug_info: object) -> str:
        name: str = self.project.project_name
        parts: list[str] = [
            f"You stumbled upon a bug in {name}'s source code.",
            f"Go to {self.project.issues_url} and copy-paste this error; "
            "a maintainer will fix the bug (usually under 24 hours).",
        ]
        if debug_info:
            parts.append(
                f"Debug info (this is for the {name} maintainers; you can ignore this): "
                f"{_serialize_debug_info(debug_info)}"
            )
        return " ".join(parts)

    def _build_error(self, error_cls: type[_E], body: str, *, stacklevel: int) -> _E:
        # stacklevel counts the public method calling this helper
        tagged: str = self._tag(error_cls.kind, body)
        return create_error_with_clean_stack(error_cls, tagged, frames_to_remove=stacklevel + 1)

    def report_bug(
        self,
        condition: object,
        debug_info: object = None,
        *,
        stacklevel: int = 1,
    ) -> None:
        """Raise a `BugError` unless ``condition`` is truthy.

        Args:
            condition (object): The invariant that must hold.
            debug_info (object): Optional payload for maintainers. Strings are inlined
                verbatim; anything else is JSON-serialized between backticks.
            stacklevel (int): Number of frames, counting this method, to leave out of
                the error's clean stack.

        Raises:
            BugError: If ``condition`` is falsy.
        """
        if condition:
            return
        self.state.has_logged = True
        error: BugError = self._build_error(
            BugError, self._bug_message(debug_info), stacklevel=stacklevel
        )
        logger.trace("Raising bug: %r", error.message)
        self.state.run_before_log_hook()
        raise error

    def report_usage_error(self, condition: object, message: str, *, stacklevel: int = 1) -> None:
        """Raise a `UsageError` unless ``condition`` is truthy.

        Args:
            condition (object): The caller contract that must hold.
            message (str): The complete user-facing explanation.
            stacklevel (int): Number of frames, counting this method, to leave out of
                the error's clean stack.

        Raises:
            UsageError: If ``condition`` is falsy.
        """
        if condition:
            return
        self.state.has_logged = True
        error: UsageError = self._build_error(UsageError, message, stacklevel=stacklevel)
        logger.trace("Raising usage error: %r", error.message)
        self.state.run_before_log_hook()
        raise error

    def build_project_error(self, message: str, *, stacklevel: int = 1) -> ProjectError:
        """Return a tagged `ProjectError` without raising it or touching the state.

        Args:
            message (str): The error message.
            stacklevel (int): Number of frames, counting this method, to leave out of
                the error's clean stack.

        Returns:
            ProjectError: The error, for the caller to raise.
        """
        return self._build_error(ProjectError, message, stacklevel=stacklevel)

    def report_warning(
        self,
        condition: object,
        message: str,
        *,
        only_once: bool | str = True,
        show_stack_trace: bool = False,
        stacklevel: int = 1,
    ) -> None:
        """Log a warning unless ``condition`` is truthy.

        Args:
            condition (object): The condition expected to hold.
            message (str): The warning text.
            only_once (bool | str): ``True`` logs each distinct message once; a string is
                used as the dedup key, so several messages can share one suppression;
                ``False`` (or ``""``) always logs.
            show_stack_trace (bool): Pass a `DiagnosticWarning` carrying a clean stack to
                the logger instead of the plain message.
            stacklevel (int): Number of frames, counting this method, to leave out of
                the warning's clean stack.
        """
        if condition:
            return
        self.state.has_logged = True
        tagged: str = self._tag(DiagnosticWarning.kind, message)
        if only_once:
            key: str = only_once if isinstance(only_once, str) else tagged
            if not self.state.mark_logged(key):
                logger.trace("Suppressed already logged warning (key=%r)", key)
                return
        self.state.run_before_log_hook()
        if show_stack_trace:
            warning: DiagnosticWarning = create_error_with_clean_stack(
                DiagnosticWarning, tagged, frames_to_remove=stacklevel
            )
            self.state.logger(warning, "warn")
        else:
            self.state.logger(tagged, "warn")

    def report_info(self, condition: object, message: str, *, only_once: bool) -> None:
        """Log an info message unless ``condition`` is truthy.

        Info never marks the state as having logged.

        Args:
            condition (object): The condition expected to hold.
            message (str): The info text.
            only_once (bool): Log each distinct message at most once.
        """
        if condition:
            return
        tagged: str = self._tag(DiagnosticKind.INFO, message)
        if only_once and not self.state.mark_logged(tagged):
            logger.trace("Suppressed already logged info (key=%r)", tagged)
            return
        self.state.run_before_log_hook()
        self.state.logger(tagged, "info")

    def register_pre_log_hook(self, hook: Callable[[], None]) -> None:
        """Replace the hook run right before any diagnostic is logged or raised."""
        logger.debug("Registering pre-log hook %s", _describe_callable(hook))
        self.state.on_before_log = hook

    def has_ever_logged(self) -> bool:
        """Return True once any bug, usage error or warning failed its condition."""
        return self.state.has_logged

    def set_logger(self, new_logger: Logger) -> None:
        """Replace the logger receiving warnings and info."""
        logger.debug("Setting diagnostic logger %s", _describe_callable(new_logger))
        self.state.logger = new_logger

    def set_colorer(self, colorer: Colorer) -> None:
        """Replace the colorer decorating ``[Kind]`` labels."""
        logger.debug("Setting diagnostic colorer %s", _describe_callable(colorer))
        self.state.colorer = colorer

    def decode(self, err: object) -> DecodedMessage | None:
        """Recognize a message tagged by this emitter's project.

        See [`decode_error`][diagtag.diagnostic.codec.decode_error].
        """
        return _decode_error(err, project=self.project)


_emitter: DiagnosticEmitter | None = None


def get_emitter() -> DiagnosticEmitter:
    """Return the process-wide emitter, creating it on first access."""
    global _emitter
    if _emitter is None:
        _emitter = DiagnosticEmitter(get_global_state())
    return _emitter


def report_bug(condition: object, debug_info: object = None) -> None:
    """Raise a `BugError` unless ``condition`` is truthy (process-wide emitter).

    Raises:
        BugError: If ``condition`` is falsy.
    """
    get_emitter().report_bug(condition, debug_info, stacklevel=_FACADE_STACKLEVEL)


def report_usage_error(condition: object, message: str) -> None:
    """Raise a `UsageError` unless ``condition`` is truthy (process-wide emitter).

    Raises:
        UsageError: If ``condition`` is falsy.
    """
    get_emitter().report_usage_error(condition, message, stacklevel=_FACADE_STACKLEVEL)


def build_project_error(message: str) -> ProjectError:
    """Return a tagged `ProjectError` (process-wide emitter)."""
    return get_emitter().build_project_error(message, stacklevel=_FACADE_STACKLEVEL)


def report_warning(
    condition: object,
    message: str,
    *,
    only_once: bool | str = True,
    show_stack_trace: bool = False,
) -> None:
    """Log a warning unless ``condition`` is truthy (process-wide emitter)."""
    get_emitter().report_warning(
        condition,
        message,
        only_once=only_once,
        show_stack_trace=show_stack_trace,
        stacklevel=_FACADE_STACKLEVEL,
    )


def report_info(condition: object, message: str, *, only_once: bool) -> None:
    """Log an info message unless ``condition`` is truthy (process-wide emitter)."""
    get_emitter().report_info(condition, message, only_once=only_once)


def register_pre_log_hook(hook: Callable[[], None]) -> None:
    """Replace the process-wide pre-log hook."""
    get_emitter().register_pre_log_hook(hook)


def has_ever_logged() -> bool:
    """Return True once any process-wide bug, usage error or warning failed its condition."""
    return get_emitter().has_ever_logged()


def set_logger(new_logger: Logger) -> None:
    """Replace the process-wide diagnostic logger."""
    get_emitter().set_logger(new_logger)


def set_colorer(colorer: Colorer) -> None:
    """Replace the process-wide colorer."""
    get_emitter().set_colorer(colorer)


def decode_error(err: object) -> DecodedMessage | None:
    """Recognize a message tagged by the process-wide emitter's project."""
    return get_emitter().decode(err)
