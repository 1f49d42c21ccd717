# topmark:header:start
#
#   project      : DiagTag
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DiagTag test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Tests should not share diagnostic state: the dedup set only grows and the
    has-logged flag never resets. Use the `state` / `emitter` fixtures for an explicitly
    constructed state; the process-wide state and emitter are reset around every test so
    the module-level functions start from scratch too.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

import pytest

from diagtag.config import logging
from diagtag.config.project import ProjectInfo
from diagtag.diagnostic import emitter as emitter_module
from diagtag.diagnostic import state as state_module
from diagtag.diagnostic.emitter import DiagnosticEmitter
from diagtag.diagnostic.state import DiagnosticState
from diagtag.diagnostic.types import LogType

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@dataclass
class RecordingLogger:
    """Diagnostic logger that records every call instead of writing it out."""

    calls: list[tuple[str | BaseException, LogType]] = field(
        default_factory=lambda: list[tuple[str | BaseException, LogType]]()
    )

    def __call__(self, message: str | BaseException, log_type: LogType) -> None:
        self.calls.append((message, log_type))

    @property
    def messages(self) -> list[str]:
        """Return the logged messages as text."""
        return [m if isinstance(m, str) else str(m) for m, _ in self.calls]


_FRAME_RE: re.Pattern[str] = re.compile(r'^\s*File ".*", line \d+, in (.+)$', re.MULTILINE)


def frame_names(stack: str) -> list[str]:
    """Return the function names of the frames in a rendered stack, outermost first."""
    return _FRAME_RE.findall(stack)


ACME: ProjectInfo = ProjectInfo(
    package_name="acme",
    project_name="Acme",
    version="1.2.3",
    repository="https://example.org/acme",
)


@pytest.fixture(autouse=True)
def silence_diagtag_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure DiagTag's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("DIAGTAG_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def fresh_global_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without a process-wide state or emitter.

    Args:
        monkeypatch (pytest.MonkeyPatch): Restores the module globals after the test.
    """
    monkeypatch.setattr(state_module, "_global_state", None)
    monkeypatch.setattr(emitter_module, "_emitter", None)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure DiagTag's internal logging at TRACE level for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def project() -> ProjectInfo:
    """Return the project info used to tag messages in tests."""
    return ACME


@pytest.fixture
def state() -> DiagnosticState:
    """Return a fresh diagnostic state."""
    return DiagnosticState()


@pytest.fixture
def recorder(state: DiagnosticState) -> RecordingLogger:
    """Install a recording logger on the `state` fixture and return it."""
    rec = RecordingLogger()
    state.logger = rec
    return rec


@pytest.fixture
def emitter(state: DiagnosticState, project: ProjectInfo) -> DiagnosticEmitter:
    """Return an emitter bound to the `state` fixture and the test project."""
    return DiagnosticEmitter(state, project=project)
