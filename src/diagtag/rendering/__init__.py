# topmark:header:start
#
#   project      : DiagTag
#   file         : __init__.py
#   file_relpath : src/diagtag/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing rendering helpers (colors and colorers)."""

from __future__ import annotations

from diagtag.rendering.color import (
    ColorMode,
    chalk_colorer,
    identity_colorer,
    resolve_color_mode,
    select_colorer,
)
from diagtag.rendering.colored_enum import ColorName

__all__ = [
    "ColorMode",
    "ColorName",
    "chalk_colorer",
    "identity_colorer",
    "resolve_color_mode",
    "select_colorer",
]
