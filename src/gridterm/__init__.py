"""
gridterm: proportional grid layouts for terminal UIs

Split the terminal into rows and columns, pin the ones that need an
exact share, and let the rest divide what is left.

Quick Start:
    >>> from gridterm import Grid
    >>> grid = Grid(120, 40, columns=3, rows=2)
    >>> grid.column_configure(0, 50)
    >>> grid.columns.shares
    [50, 25, 25]
    >>> grid.get_placement_chars(2, 1)
    (31, 1)

Features:
    - Priority ("pinned") sizing with equal redistribution of the rest
    - Percent to character conversion that never yields an empty region
    - Window with a handle-addressed widget registry and spans
    - Scoped terminal modes (alternate screen, raw input)
    - ``gridterm layout`` to inspect a grid from the shell
"""

__version__ = "0.1.0"

# Layout engine
from gridterm.core.cell import Cell
from gridterm.core.axis import Axis
from gridterm.core.grid import Grid, GridConfig
from gridterm.core.errors import (
    LayoutError,
    InvalidLengthError,
    IndexOutOfRangeError,
    InvalidPercentError,
    OverAllocationError,
    ConfigurationError,
)

# Terminal front end
from gridterm.cli.core.theme import Theme
from gridterm.cli.widgets.label import Label
from gridterm.cli.window import Window, WindowConfig

__all__ = [
    # Version
    "__version__",
    # Layout engine
    "Cell",
    "Axis",
    "Grid",
    "GridConfig",
    # Errors
    "LayoutError",
    "InvalidLengthError",
    "IndexOutOfRangeError",
    "InvalidPercentError",
    "OverAllocationError",
    "ConfigurationError",
    # Front end
    "Theme",
    "Label",
    "Window",
    "WindowConfig",
]
