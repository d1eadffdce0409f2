"""Terminal infrastructure - terminal I/O, input handling, colors, boxes."""

from gridterm.cli.core.terminal import Terminal, TerminalSize
from gridterm.cli.core.input import InputReader, KeyEvent, Key
from gridterm.cli.core.theme import Theme, default_theme
from gridterm.cli.core.boxes import border_box, fill_box

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "Theme",
    "default_theme",
    "border_box",
    "fill_box",
]
