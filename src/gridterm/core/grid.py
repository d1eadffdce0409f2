"""Grid - two axes plus the terminal size, with placement queries.

Coordinates handed to the query methods are 1-based, matching the
terminal's own cursor addressing. Configure methods take the 0-based
index of the cell in its axis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from gridterm.core.axis import FULL_SHARE, Axis
from gridterm.core.errors import ConfigurationError, LayoutError

logger = logging.getLogger(__name__)

DEFAULT_AXIS_LENGTH = 5


@dataclass
class GridConfig:
    """
    Settings for building a Grid in one validated step.

    ``column_shares`` and ``row_shares`` map a 0-based index to the
    percent that cell is pinned to. The character size has no default:
    the owner must supply the live terminal size.
    """

    width_chars: Optional[int] = None
    height_chars: Optional[int] = None
    columns: int = DEFAULT_AXIS_LENGTH
    rows: int = DEFAULT_AXIS_LENGTH
    column_shares: dict[int, int] = field(default_factory=dict)
    row_shares: dict[int, int] = field(default_factory=dict)

    def validate(self) -> None:
        """Raise ConfigurationError if these settings can't build a grid."""
        if self.width_chars is None or self.height_chars is None:
            raise ConfigurationError("Grid character size must be set")
        if self.width_chars < 0 or self.height_chars < 0:
            raise ConfigurationError(
                f"Grid character size must be non-negative, "
                f"got {self.width_chars}x{self.height_chars}"
            )
        for name, length in (("columns", self.columns), ("rows", self.rows)):
            if length < 1:
                raise ConfigurationError(f"Grid needs at least 1 of {name}, got {length}")
        for name, length, shares in (
            ("column", self.columns, self.column_shares),
            ("row", self.rows, self.row_shares),
        ):
            for index, percent in shares.items():
                if not 0 <= index < length:
                    raise ConfigurationError(
                        f"{name} share index {index} outside 0..{length - 1}"
                    )
                if not 0 <= percent <= FULL_SHARE:
                    raise ConfigurationError(
                        f"{name} {index} share must be 0-100, got {percent}"
                    )
            if sum(shares.values()) > FULL_SHARE:
                raise ConfigurationError(
                    f"Pinned {name} shares total {sum(shares.values())}%, more than 100%"
                )

    def with_size(self, width_chars: int, height_chars: int) -> GridConfig:
        """Copy of this config with the character size filled in."""
        return GridConfig(
            width_chars=width_chars,
            height_chars=height_chars,
            columns=self.columns,
            rows=self.rows,
            column_shares=dict(self.column_shares),
            row_shares=dict(self.row_shares),
        )


class Grid:
    """
    Proportional rows and columns laid over a terminal surface.

    A new grid splits each axis into equal cells (5x5 at 20% by default).
    Pinning a cell with ``column_configure``/``row_configure`` reserves
    exactly that share and the rest of the axis shares the remainder.

    Example:
        >>> grid = Grid(150, 36, columns=10, rows=5)
        >>> grid.get_placement_percent(2, 3)
        (11, 41)
        >>> grid.get_placement_chars(2, 3)
        (16, 14)
    """

    def __init__(
        self,
        width_chars: int,
        height_chars: int,
        columns: int = DEFAULT_AXIS_LENGTH,
        rows: int = DEFAULT_AXIS_LENGTH,
    ) -> None:
        if width_chars is None or height_chars is None:
            raise ConfigurationError("Grid character size must be set")
        self.columns = Axis(columns)
        self.rows = Axis(rows)
        self.width_chars = 0
        self.height_chars = 0
        self.set_size_chars(width_chars, height_chars)

    @classmethod
    def from_config(cls, config: GridConfig) -> Grid:
        """Validate ``config`` and build a grid with its pinned shares applied."""
        config.validate()
        assert config.width_chars is not None and config.height_chars is not None
        grid = cls(
            config.width_chars,
            config.height_chars,
            columns=config.columns,
            rows=config.rows,
        )
        try:
            for index, percent in sorted(config.column_shares.items()):
                grid.column_configure(index, percent)
            for index, percent in sorted(config.row_shares.items()):
                grid.row_configure(index, percent)
        except LayoutError as e:
            raise ConfigurationError(str(e)) from e
        return grid

    def __repr__(self) -> str:
        return (
            f"Grid({self.width_chars}x{self.height_chars} chars, "
            f"columns={self.columns!r}, rows={self.rows!r})"
        )

    # Size

    def set_width_chars(self, width: int) -> None:
        if width < 0:
            raise ConfigurationError(f"Width must be non-negative, got {width}")
        self.width_chars = width

    def set_height_chars(self, height: int) -> None:
        if height < 0:
            raise ConfigurationError(f"Height must be non-negative, got {height}")
        self.height_chars = height

    def set_size_chars(self, width: int, height: int) -> None:
        """Update the terminal size. Shares are not recomputed."""
        self.set_width_chars(width)
        self.set_height_chars(height)
        logger.debug("Grid size set to %dx%d chars", width, height)

    # Axis configuration

    def set_columns(self, length: int) -> None:
        """Reset the columns to ``length`` equal, unpinned cells."""
        self.columns.resize(length)

    def set_rows(self, length: int) -> None:
        """Reset the rows to ``length`` equal, unpinned cells."""
        self.rows.resize(length)

    def column_configure(self, index: int, percent: int) -> None:
        """Pin column ``index`` (0-based) to ``percent`` of the width."""
        self.columns.configure(index, percent)

    def row_configure(self, index: int, percent: int) -> None:
        """Pin row ``index`` (0-based) to ``percent`` of the height."""
        self.rows.configure(index, percent)

    def recalculate(self) -> None:
        """Redistribute both axes from their current pins."""
        self.rows.redistribute()
        self.columns.redistribute()

    # Conversion

    def percent_to_char_width(self, percent: int) -> int:
        """Characters covered by ``percent`` of the width, never less than 1."""
        return max(1, self.width_chars * percent // FULL_SHARE)

    def percent_to_char_height(self, percent: int) -> int:
        """Characters covered by ``percent`` of the height, never less than 1."""
        return max(1, self.height_chars * percent // FULL_SHARE)

    # Placement

    def get_placement_percent(self, column: int, row: int) -> tuple[int, int]:
        """Top-left corner of cell (``column``, ``row``) in percent."""
        return self.columns.offset(column), self.rows.offset(row)

    def get_placement_chars(self, column: int, row: int) -> tuple[int, int]:
        """Top-left corner of cell (``column``, ``row``) in characters."""
        percent_x, percent_y = self.get_placement_percent(column, row)
        return self.percent_to_char_width(percent_x), self.percent_to_char_height(percent_y)

    def get_column_chars(self, column: int) -> int:
        """Width in characters of the 1-based ``column``."""
        self.columns.check_position(column)
        return self.percent_to_char_width(self.columns[column - 1].share)

    def get_row_chars(self, row: int) -> int:
        """Height in characters of the 1-based ``row``."""
        self.rows.check_position(row)
        return self.percent_to_char_height(self.rows[row - 1].share)

    def get_cell_chars(
        self,
        column: int,
        row: int,
        column_span: int = 1,
        row_span: int = 1,
    ) -> tuple[int, int, int, int]:
        """
        Rectangle ``(x, y, width, height)`` of a cell and its span.

        The size is the sum of the spanned columns' and rows' extents.
        """
        x, y = self.get_placement_chars(column, row)
        width = sum(self.get_column_chars(c) for c in range(column, column + column_span))
        height = sum(self.get_row_chars(r) for r in range(row, row + row_span))
        return x, y, width, height

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the grid for display or serialization."""
        return {
            "width_chars": self.width_chars,
            "height_chars": self.height_chars,
            "columns": [
                {
                    "index": i + 1,
                    "share": cell.share,
                    "pinned": cell.pinned,
                    "chars": self.get_column_chars(i + 1),
                    "offset": self.columns.offset(i + 1),
                }
                for i, cell in enumerate(self.columns)
            ],
            "rows": [
                {
                    "index": i + 1,
                    "share": cell.share,
                    "pinned": cell.pinned,
                    "chars": self.get_row_chars(i + 1),
                    "offset": self.rows.offset(i + 1),
                }
                for i, cell in enumerate(self.rows)
            ],
            "column_total": self.columns.total,
            "row_total": self.rows.total,
        }
