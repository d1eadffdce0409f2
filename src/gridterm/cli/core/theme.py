"""Theme - foreground/background colors used when painting widgets."""

from __future__ import annotations

from dataclasses import dataclass

from gridterm.cli.core.constants import CSI, RESET

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """
    A pair of 24-bit colors.

    Defaults to white text on black.
    """
    fg: RGB = (255, 255, 255)
    bg: RGB = (0, 0, 0)

    def __post_init__(self) -> None:
        for name, rgb in (("fg", self.fg), ("bg", self.bg)):
            if len(rgb) != 3 or not all(0 <= c <= 255 for c in rgb):
                raise ValueError(f"{name} must be three values 0-255, got {rgb}")

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for the foreground color."""
        r, g, b = self.fg
        return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for the background color."""
        r, g, b = self.bg
        return f"48;2;{r};{g};{b}"

    def paint(self, text: str) -> str:
        """Wrap ``text`` in this theme's colors, resetting afterwards."""
        return f"{CSI}{self.to_sgr_fg()};{self.to_sgr_bg()}m{text}{RESET}"

    def with_fg(self, r: int, g: int, b: int) -> Theme:
        return Theme(fg=(r, g, b), bg=self.bg)

    def with_bg(self, r: int, g: int, b: int) -> Theme:
        return Theme(fg=self.fg, bg=(r, g, b))


def default_theme() -> Theme:
    """Returns the default theme."""
    return Theme()
