"""Terminal front end - window, widgets and the command line."""

from gridterm.cli.window import Window, WindowConfig

__all__ = [
    "Window",
    "WindowConfig",
]
