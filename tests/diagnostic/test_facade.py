# topmark:header:start
#
#   project      : DiagTag
#   file         : test_facade.py
#   file_relpath : tests/diagnostic/test_facade.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the module-level functions bound to the process-wide emitter.

The `fresh_global_state` autouse fixture resets the process-wide state and emitter
before each test.
"""

from __future__ import annotations

import pytest

import diagtag
from diagtag import (
    BugError,
    DecodedMessage,
    ProjectError,
    UsageError,
    build_project_error,
    decode_error,
    get_emitter,
    get_global_state,
    has_ever_logged,
    register_pre_log_hook,
    report_bug,
    report_info,
    report_usage_error,
    report_warning,
    set_colorer,
    set_logger,
)
from diagtag.constants import DIAGTAG_VERSION
from tests.conftest import RecordingLogger, frame_names


def test_process_wide_emitter_uses_global_state() -> None:
    """The process-wide emitter should be created once, on the global state."""
    emitter = get_emitter()

    assert get_emitter() is emitter
    assert emitter.state is get_global_state()
    assert emitter.project.package_name == "diagtag"


def test_report_bug_facade_stack_points_at_caller() -> None:
    """Going through the module-level function should still end the stack at the caller."""
    with pytest.raises(BugError) as exc_info:
        report_bug(False)

    names: list[str] = frame_names(exc_info.value.stack)
    assert names[-1] == "test_report_bug_facade_stack_points_at_caller"
    assert exc_info.value.message.startswith(f"[diagtag@{DIAGTAG_VERSION}][Bug] ")
    assert has_ever_logged() is True


def test_report_usage_error_facade() -> None:
    """The module-level usage error should raise and mark the process as having logged."""
    assert has_ever_logged() is False

    with pytest.raises(UsageError) as exc_info:
        report_usage_error(0, "`count` must be non-zero")

    assert exc_info.value.message == "[diagtag][Wrong Usage] `count` must be non-zero"
    assert frame_names(exc_info.value.stack)[-1] == "test_report_usage_error_facade"
    assert has_ever_logged() is True


def test_build_project_error_facade_round_trips_through_decode() -> None:
    """An error built and raised by the host should be recognized by `decode_error`."""
    error: ProjectError = build_project_error("Cannot resolve route")
    assert frame_names(error.stack)[-1] == (
        "test_build_project_error_facade_round_trips_through_decode"
    )

    with pytest.raises(ProjectError) as exc_info:
        raise error

    decoded: DecodedMessage | None = decode_error(exc_info.value)
    assert decoded == DecodedMessage(message="[Error] Cannot resolve route", has_version=False)
    assert has_ever_logged() is False


def test_warning_and_info_facade_use_swapped_plug_points() -> None:
    """Logger and colorer swaps should apply to the module-level functions."""
    recorder = RecordingLogger()
    set_logger(recorder)
    set_colorer(lambda text, color: f"{color}:{text}")
    hooks: list[str] = []
    register_pre_log_hook(lambda: hooks.append("first"))
    register_pre_log_hook(lambda: hooks.append("second"))

    report_warning(False, "slow path")
    report_warning(False, "slow path")
    report_info(False, "ready", only_once=False)

    assert recorder.calls == [
        ("[diagtag]yellow:[Warning] slow path", "warn"),
        ("[diagtag]blue:[Info] ready", "info"),
    ]
    assert hooks == ["second", "second"]


def test_warning_facade_stack_trace_points_at_caller() -> None:
    """A stack-traced warning from the module-level function should end at the caller."""
    recorder = RecordingLogger()
    set_logger(recorder)

    report_warning(False, "deprecated", show_stack_trace=True)

    [(payload, _)] = recorder.calls
    assert isinstance(payload, diagtag.DiagnosticWarning)
    assert frame_names(payload.stack)[-1] == "test_warning_facade_stack_trace_points_at_caller"


def test_default_process_wide_logger_writes_warning_to_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Without a custom logger, warnings should land on stderr."""
    report_warning(False, "heads up")

    assert capsys.readouterr().err == "[diagtag][Warning] heads up\n"
