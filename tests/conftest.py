"""Shared fixtures for the layout engine and the terminal front end."""

import logging

import pytest

from gridterm.cli.core.terminal import Terminal, TerminalSize
from gridterm.cli.window import Window, WindowConfig
from gridterm.core.grid import Grid, GridConfig


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any handlers or levels a test installs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logging.getLogger("gridterm").setLevel(logging.NOTSET)


@pytest.fixture
def default_grid() -> Grid:
    """5x5 equal grid on a 150x36 screen."""
    return Grid(150, 36)


@pytest.fixture
def wide_grid() -> Grid:
    """10 columns x 5 rows on a 150x36 screen."""
    return Grid(150, 36, columns=10, rows=5)


@pytest.fixture
def terminal_size(monkeypatch: pytest.MonkeyPatch):
    """Pin ``Terminal.size()``; returns a setter for later resizes."""
    current = {"size": TerminalSize(100, 50)}

    def set_size(cols: int, rows: int) -> None:
        current["size"] = TerminalSize(cols, rows)

    monkeypatch.setattr(Terminal, "size", staticmethod(lambda: current["size"]))
    return set_size


@pytest.fixture
def window() -> Window:
    """Window with a 4x2 grid on a 100x50 screen."""
    return Window(
        WindowConfig(grid=GridConfig(width_chars=100, height_chars=50, columns=4, rows=2))
    )
