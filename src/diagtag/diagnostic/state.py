# topmark:header:start
#
#   project      : DiagTag
#   file         : state.py
#   file_relpath : src/diagtag/diagnostic/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic state shared by emitters.

Sections:
    * default_logger: writes info to stdout and warnings to stderr.
    * DiagnosticState: dedup keys, pre-log hook, has-logged flag and the two plug points.
    * get_global_state: the lazily created process-wide instance.

Invariants:
    - ``already_logged`` only grows; a key in it is never logged again under the
      "log once" policy.
    - ``has_logged`` never goes back to False.
    - ``on_before_log``, ``logger`` and ``colorer`` are replaced, never stacked.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import click

from diagtag.config.logging import get_logger
from diagtag.diagnostic.errors import DiagnosticError
from diagtag.rendering.color import identity_colorer

if TYPE_CHECKING:
    from collections.abc import Callable

    from diagtag.config.logging import DiagtagLogger
    from diagtag.diagnostic.types import Colorer, Logger, LogType


logger: DiagtagLogger = get_logger(__name__)


def default_logger(message: str | BaseException, log_type: LogType) -> None:
    """Write ``info`` diagnostics to stdout and ``warn`` diagnostics to stderr.

    Exceptions are rendered with their stack. ``click.echo`` strips ANSI styles when
    the target stream is not a terminal.

    Args:
        message (str | BaseException): The tagged message, or an exception carrying it.
        log_type (LogType): ``"warn"`` or ``"info"``.
    """
    if isinstance(message, DiagnosticError):
        text: str = message.render()
    elif isinstance(message, BaseException):
        text = "".join(traceback.format_exception(message)).rstrip("\n")
    else:
        text = message
    click.echo(text, err=log_type != "info")


@dataclass
class DiagnosticState:
    """Mutable state behind one or more diagnostic emitters.

    Attributes:
        already_logged (set[str]): Dedup keys of warnings/info already emitted.
        on_before_log (Callable[[], None] | None): Hook run right before any diagnostic
            is logged or raised.
        has_logged (bool): True once any bug, usage error or warning failed its condition.
        logger (Logger): Receives non-halting diagnostics.
        colorer (Colorer): Decorates the ``[Kind]`` label of tagged messages.
    """

    already_logged: set[str] = field(default_factory=lambda: set[str]())
    on_before_log: Callable[[], None] | None = None
    has_logged: bool = False
    logger: Logger = default_logger
    colorer: Colorer = identity_colorer

    def mark_logged(self, key: str) -> bool:
        """Record ``key`` as logged.

        Args:
            key (str): The dedup key.

        Returns:
            bool: True if the key was new, False if it had already been logged.
        """
        if key in self.already_logged:
            return False
        self.already_logged.add(key)
        return True

    def run_before_log_hook(self) -> None:
        """Run the registered pre-log hook, if any. Exceptions propagate."""
        if self.on_before_log is not None:
            self.on_before_log()


_global_state: DiagnosticState | None = None


def get_global_state() -> DiagnosticState:
    """Return the process-wide diagnostic state, creating it on first access."""
    global _global_state
    if _global_state is None:
        _global_state = DiagnosticState()
        logger.trace("Created process-wide diagnostic state")
    return _global_state
