# topmark:header:start
#
#   project      : DiagTag
#   file         : __init__.py
#   file_relpath : src/diagtag/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives: kinds, state, tagged-message codec and the emitter.

Design:
    - A diagnostic's kind is only recoverable from its tagged message, by prefix matching.
    - All mutable state lives in one explicitly constructed `DiagnosticState`; emitters
      are injected with it. The process-wide instance is created on first access.
    - Logger and colorer are plug points held by the state and replaced through setters.
"""

from __future__ import annotations

from diagtag.diagnostic.codec import DecodedMessage, decode_error, encode_message
from diagtag.diagnostic.emitter import DiagnosticEmitter, get_emitter
from diagtag.diagnostic.errors import (
    BugError,
    DiagnosticError,
    DiagnosticWarning,
    ProjectError,
    UsageError,
    create_error_with_clean_stack,
)
from diagtag.diagnostic.kinds import DiagnosticKind
from diagtag.diagnostic.state import DiagnosticState, default_logger, get_global_state
from diagtag.diagnostic.types import Colorer, Logger, LogType

__all__ = [
    "BugError",
    "Colorer",
    "DecodedMessage",
    "DiagnosticEmitter",
    "DiagnosticError",
    "DiagnosticKind",
    "DiagnosticState",
    "DiagnosticWarning",
    "LogType",
    "Logger",
    "ProjectError",
    "UsageError",
    "create_error_with_clean_stack",
    "decode_error",
    "default_logger",
    "encode_message",
    "get_emitter",
    "get_global_state",
]
