# topmark:header:start
#
#   project      : DiagTag
#   file         : colored_enum.py
#   file_relpath : src/diagtag/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color names understood by DiagTag colorers.

Colorers receive a color as a plain string (``"red"``, ``"blue"`` or ``"yellow"``) so
that hosts can plug in any styling backend. [`ColorName`][diagtag.rendering.colored_enum.ColorName]
is a ``str`` enum over those names that additionally carries the matching `yachalk`
style, used by the bundled chalk colorer.

Example:
    ```python
    print(ColorName.RED == "red")          # True
    print(ColorName.RED.color("[Bug]"))    # red "[Bug]" on a color-capable terminal
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic list of
    arguments and a `sep` keyword. DiagTag only ever calls colorizers with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values
                are provided. Defaults to a single space.

        Returns:
            str: The colorized and concatenated output string.
        """
        ...


class ColorName(str, Enum):
    """Closed set of colors a diagnostic prefix can be rendered in.

    The enum member is a ``str`` equal to the color name; the `yachalk` style is stored
    separately and exposed via `.color`.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColorName:
        """Construct a color name member.

        Args:
            text (str): The color name (stored in `_value_`).
            color (Colorizer): The style applying this color.

        Returns:
            ColorName: The newly constructed enum member.
        """
        obj: ColorName = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    RED = ("red", chalk.red)
    BLUE = ("blue", chalk.blue)
    YELLOW = ("yellow", chalk.yellow)

    @property
    def color(self) -> Colorizer:
        """Return the `yachalk` style for this color."""
        return self._color

    def __str__(self) -> str:
        return self._value_
