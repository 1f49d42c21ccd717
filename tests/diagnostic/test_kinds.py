# topmark:header:start
#
#   project      : DiagTag
#   file         : test_kinds.py
#   file_relpath : tests/diagnostic/test_kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `DiagnosticKind` attributes."""

from __future__ import annotations

from diagtag.diagnostic.kinds import DiagnosticKind
from diagtag.rendering.colored_enum import ColorName


def test_kind_table() -> None:
    """Labels, colors and tag form should match the kind table."""
    table: dict[DiagnosticKind, tuple[str, ColorName, bool]] = {
        kind: (kind.label, kind.color, kind.versioned) for kind in DiagnosticKind
    }

    assert table == {
        DiagnosticKind.BUG: ("[Bug]", ColorName.RED, True),
        DiagnosticKind.WRONG_USAGE: ("[Wrong Usage]", ColorName.RED, False),
        DiagnosticKind.ERROR: ("[Error]", ColorName.RED, False),
        DiagnosticKind.WARNING: ("[Warning]", ColorName.YELLOW, False),
        DiagnosticKind.INFO: ("[Info]", ColorName.BLUE, False),
    }
