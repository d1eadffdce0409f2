"""Window - owns the grid and the child widgets, and runs the event loop."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import Optional

from gridterm.cli.core.input import InputReader, KeyEvent
from gridterm.cli.core.terminal import Terminal
from gridterm.cli.core.theme import Theme, default_theme
from gridterm.cli.widgets.base import Rect, Widget
from gridterm.cli.widgets.registry import (
    AbsolutePlacement,
    GridPlacement,
    Placement,
    WidgetHandle,
    WidgetRegistry,
)
from gridterm.core.errors import IndexOutOfRangeError
from gridterm.core.grid import Grid, GridConfig

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """
    Settings for a Window.

    A grid config without a character size picks up the live terminal
    size when the window is created.
    """
    grid: GridConfig = field(default_factory=GridConfig)
    theme: Theme = field(default_factory=default_theme)
    poll_interval: float = 0.1
    quit_keys: tuple[str, ...] = ("q",)

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")


class Window:
    """
    The top-level surface of a terminal application.

    Children are placed either on a grid cell (resized with the terminal)
    or at a fixed character rectangle. Terminal modes (alternate screen,
    hidden cursor, raw input) are held only while the window is entered
    as a context manager, and are released on every exit path.

    Example:
        >>> window = Window()
        >>> window.place(Label("Hello"), column=1, row=1, column_span=2)
        >>> window.run()
    """

    def __init__(
        self,
        config: Optional[WindowConfig] = None,
        input_reader: Optional[InputReader] = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.theme = self.config.theme
        self.grid = Grid.from_config(self._sized_grid_config(self.config.grid))
        self.children = WidgetRegistry()
        self.running = False
        self._input = input_reader
        self._modes: Optional[ExitStack] = None

    @staticmethod
    def _sized_grid_config(grid_config: GridConfig) -> GridConfig:
        if grid_config.width_chars is not None and grid_config.height_chars is not None:
            return grid_config
        size = Terminal.size()
        return grid_config.with_size(
            size.cols if grid_config.width_chars is None else grid_config.width_chars,
            size.rows if grid_config.height_chars is None else grid_config.height_chars,
        )

    # Terminal modes

    def __enter__(self) -> Window:
        if self._modes is not None:
            raise RuntimeError("Window is already in managed terminal mode")
        stack = ExitStack()
        stack.enter_context(Terminal.managed_mode())
        self._modes = stack
        logger.info("Window entered managed terminal mode")
        return self

    def __exit__(self, *exc_info) -> None:
        if self._modes is not None:
            self._modes.close()
            self._modes = None
            logger.info("Window left managed terminal mode")

    # Children

    def place(
        self,
        widget: Widget,
        column: int,
        row: int,
        column_span: int = 1,
        row_span: int = 1,
    ) -> WidgetHandle:
        """Put ``widget`` on the 1-based grid cell (``column``, ``row``)."""
        placement = GridPlacement(column, row, column_span, row_span)
        self._bounds(placement)
        return self.children.add(widget, placement)

    def add(self, widget: Widget, x: int, y: int, width: int, height: int) -> WidgetHandle:
        """Put ``widget`` at a fixed character rectangle, ignoring the grid."""
        return self.children.add(widget, AbsolutePlacement(x, y, width, height))

    def remove(self, handle: WidgetHandle) -> Widget:
        return self.children.remove(handle)

    def replace(self, handle: WidgetHandle, widget: Widget) -> Widget:
        """Swap the widget behind ``handle``, keeping its placement."""
        return self.children.replace(handle, widget)

    def move(
        self,
        handle: WidgetHandle,
        column: int,
        row: int,
        column_span: int = 1,
        row_span: int = 1,
    ) -> None:
        """Move a child to another grid cell."""
        placement = GridPlacement(column, row, column_span, row_span)
        self._bounds(placement)
        self.children.move(handle, placement)

    # Layout

    def resize(self, width_chars: int, height_chars: int) -> None:
        """Push a new terminal size into the grid."""
        self.grid.set_size_chars(width_chars, height_chars)
        logger.debug("Window resized to %dx%d", width_chars, height_chars)

    def set_columns(self, length: int) -> None:
        """
        Reset the grid to ``length`` equal columns.

        Raises IndexOutOfRangeError, leaving the grid untouched, if a child
        placed on the grid would fall past the last column.
        """
        for _, _, placement in self.children:
            if isinstance(placement, GridPlacement):
                last = placement.column + placement.column_span - 1
                if last > length:
                    raise IndexOutOfRangeError(last, length, one_based=True)
        self.grid.set_columns(length)

    def set_rows(self, length: int) -> None:
        """Reset the grid to ``length`` equal rows. See ``set_columns``."""
        for _, _, placement in self.children:
            if isinstance(placement, GridPlacement):
                last = placement.row + placement.row_span - 1
                if last > length:
                    raise IndexOutOfRangeError(last, length, one_based=True)
        self.grid.set_rows(length)

    def sync_size(self) -> bool:
        """Resize to the live terminal size. Returns True if it changed."""
        size = Terminal.size()
        if (size.cols, size.rows) == (self.grid.width_chars, self.grid.height_chars):
            return False
        self.resize(size.cols, size.rows)
        return True

    def layout(self) -> dict[WidgetHandle, Rect]:
        """
        Character rectangle of every child for the current size.

        Children whose grid placement no longer fits the grid (after the
        grid was reshaped directly) are left out and logged.
        """
        rects: dict[WidgetHandle, Rect] = {}
        for handle, _, placement in self.children:
            try:
                rects[handle] = self._bounds(placement)
            except IndexOutOfRangeError as e:
                logger.warning("Skipping child %s placed off the grid: %s", handle, e)
        return rects

    def _bounds(self, placement: Placement) -> Rect:
        if isinstance(placement, AbsolutePlacement):
            return Rect(placement.x, placement.y, placement.width, placement.height)
        x, y, width, height = self.grid.get_cell_chars(
            placement.column,
            placement.row,
            placement.column_span,
            placement.row_span,
        )
        return Rect(x, y, width, height)

    # Drawing

    def draw(self) -> None:
        """Clear the screen and paint every child at its rectangle."""
        Terminal.clear()
        for handle, bounds in self.layout().items():
            lines = self.children.get(handle).render(bounds)
            Terminal.write_at(bounds.y, bounds.x, lines[:bounds.height])
        logger.debug("Drew %d children", len(self.children))

    # Event loop

    def handle_input(self, event: KeyEvent) -> bool:
        """Quit on Ctrl-C or a quit key, otherwise offer the event to children."""
        if event.is_interrupt or (event.is_char and event.char in self.config.quit_keys):
            self.quit()
            return True
        for _, widget, _ in self.children:
            if widget.handle_input(event):
                return True
        return False

    def quit(self) -> None:
        self.running = False

    def run(self) -> None:
        """Draw, then redraw on resize and dispatch keys until quit."""
        if self._input is None:
            self._input = InputReader()

        self.running = True
        logger.info("Window event loop started")
        with ExitStack() as stack:
            if self._modes is None:
                stack.enter_context(self)
            self.sync_size()
            self.draw()
            while self.running:
                if self.sync_size():
                    self.draw()
                event = self._input.read(timeout=self.config.poll_interval)
                if event is not None:
                    self.handle_input(event)
        logger.info("Window event loop stopped")
