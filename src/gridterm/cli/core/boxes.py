"""Box primitives - border and fill boxes as lists of painted lines."""

from __future__ import annotations

from gridterm.cli.core.constants import BOX
from gridterm.cli.core.theme import Theme


def border_box(width: int, height: int, theme: Theme) -> list[str]:
    """
    Lines for a ``width`` x ``height`` box with a single-line border.

    Boxes too small to hold a border are filled instead.
    """
    if width < 2 or height < 2:
        return fill_box(width, height, theme)

    inner = width - 2
    top = BOX["top_left"] + BOX["horizontal"] * inner + BOX["top_right"]
    side = BOX["vertical"] + BOX["empty"] * inner + BOX["vertical"]
    bottom = BOX["bottom_left"] + BOX["horizontal"] * inner + BOX["bottom_right"]

    lines = [top] + [side] * (height - 2) + [bottom]
    return [theme.paint(line) for line in lines]


def fill_box(width: int, height: int, theme: Theme) -> list[str]:
    """Lines for a borderless box filled with the theme's background."""
    if width <= 0 or height <= 0:
        return []
    return [theme.paint(BOX["empty"] * width) for _ in range(height)]
