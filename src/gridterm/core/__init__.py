"""Layout engine - proportional grid sizing and placement."""

from gridterm.core.cell import Cell
from gridterm.core.axis import Axis
from gridterm.core.grid import Grid, GridConfig, DEFAULT_AXIS_LENGTH
from gridterm.core.errors import (
    LayoutError,
    InvalidLengthError,
    IndexOutOfRangeError,
    InvalidPercentError,
    OverAllocationError,
    ConfigurationError,
)

__all__ = [
    "Cell",
    "Axis",
    "Grid",
    "GridConfig",
    "DEFAULT_AXIS_LENGTH",
    "LayoutError",
    "InvalidLengthError",
    "IndexOutOfRangeError",
    "InvalidPercentError",
    "OverAllocationError",
    "ConfigurationError",
]
