"""Label widget for displaying a line of text in a box."""

from __future__ import annotations

from typing import Optional

from gridterm.cli.core.boxes import border_box, fill_box
from gridterm.cli.core.constants import BOX
from gridterm.cli.core.theme import Theme, default_theme
from gridterm.cli.widgets.base import BaseWidget, Rect


class Label(BaseWidget):
    """
    Text inside a bordered or filled box.

    With a border the text starts one cell in from the top-left corner,
    otherwise it starts at the corner. Text that does not fit is cut.

    Example:
        >>> label = Label("Status: ok", border=False)
        >>> window.place(label, column=1, row=1)
    """

    def __init__(
        self,
        text: str = "",
        border: bool = True,
        theme: Optional[Theme] = None,
    ) -> None:
        super().__init__()
        self.text = text
        self.border = border
        self.theme = theme or default_theme()

    def set_text(self, text: str) -> None:
        self.text = text

    def render(self, bounds: Rect) -> list[str]:
        if not self.visible or bounds.width <= 0 or bounds.height <= 0:
            return []

        bordered = self.border and bounds.width >= 2 and bounds.height >= 2
        if bordered:
            lines = border_box(bounds.width, bounds.height, self.theme)
            inner_width = bounds.width - 2
            text_row = 1 if bounds.height > 2 else None
        else:
            lines = fill_box(bounds.width, bounds.height, self.theme)
            inner_width = bounds.width
            text_row = 0

        if text_row is not None and self.text and inner_width > 0:
            text = self.text[:inner_width].ljust(inner_width)
            if bordered:
                text = BOX["vertical"] + text + BOX["vertical"]
            lines[text_row] = self.theme.paint(text)

        return lines
