# topmark:header:start
#
#   project      : DiagTag
#   file         : color.py
#   file_relpath : src/diagtag/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorers and color-mode resolution.

A *colorer* maps ``(text, color_name)`` to a decorated string. DiagTag ships two:

- [`identity_colorer`][diagtag.rendering.color.identity_colorer]: returns the text
  unchanged. This is the default held by a fresh diagnostic state.
- [`chalk_colorer`][diagtag.rendering.color.chalk_colorer]: applies the `yachalk`
  style attached to the [`ColorName`][diagtag.rendering.colored_enum.ColorName].

Hosts pick one with [`select_colorer`][diagtag.rendering.color.select_colorer], which
honors an explicit [`ColorMode`][diagtag.rendering.color.ColorMode], then the
``FORCE_COLOR`` / ``NO_COLOR`` environment variables, then TTY detection.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from diagtag.config.logging import get_logger
from diagtag.rendering.colored_enum import ColorName

if TYPE_CHECKING:
    from diagtag.config.logging import DiagtagLogger
    from diagtag.diagnostic.types import Colorer


logger: DiagtagLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stderr is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def identity_colorer(text: str, color: str) -> str:
    """Return ``text`` unchanged."""
    return text


def chalk_colorer(text: str, color: str) -> str:
    """Return ``text`` styled with the `yachalk` color named ``color``.

    Args:
        text (str): The text to decorate.
        color (str): One of ``"red"``, ``"blue"`` or ``"yellow"``.

    Returns:
        str: The decorated text.

    Raises:
        ValueError: If ``color`` is not a known color name.
    """
    return ColorName(color).color(text)


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None = None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        3. **Auto**: whether stderr (where warnings go) is a TTY.

    Args:
        color_mode_override: Explicit color mode; ``None`` or ``AUTO`` defer to the
            environment.
        stream_isatty: Optional override for TTY detection. When ``None``, the function
            calls ``sys.stderr.isatty()`` and falls back to ``False`` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        try:
            stream_isatty = sys.stderr.isatty()
        except (AttributeError, OSError, ValueError):
            stream_isatty = False
    return bool(stream_isatty)


def select_colorer(
    color_mode_override: ColorMode | None = None,
    *,
    stream_isatty: bool | None = None,
) -> Colorer:
    """Return the colorer matching the resolved color mode.

    Args:
        color_mode_override: Explicit color mode, see
            [`resolve_color_mode`][diagtag.rendering.color.resolve_color_mode].
        stream_isatty: Optional override for TTY detection.

    Returns:
        Colorer: `chalk_colorer` when color is enabled, `identity_colorer` otherwise.
    """
    enabled: bool = resolve_color_mode(
        color_mode_override=color_mode_override,
        stream_isatty=stream_isatty,
    )
    logger.debug(
        "Color output %s (override=%s)", "enabled" if enabled else "disabled", color_mode_override
    )
    return chalk_colorer if enabled else identity_colorer
