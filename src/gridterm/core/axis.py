"""Axis - the ordered cells of one grid dimension and their redistribution."""

from __future__ import annotations

import logging
from typing import Iterator

from gridterm.core.cell import Cell
from gridterm.core.errors import (
    IndexOutOfRangeError,
    InvalidLengthError,
    InvalidPercentError,
    OverAllocationError,
)

logger = logging.getLogger(__name__)

FULL_SHARE = 100


class Axis:
    """
    All the columns (or all the rows) of a grid.

    Pinned cells keep the share they were configured with. Every other
    cell gets an equal, floor-divided part of whatever the pinned cells
    leave over. The floor remainder is dropped, so ``total`` can end up
    below 100 (e.g. 3 flexible cells share 100% as 33 + 33 + 33).

    Example:
        >>> axis = Axis(4)
        >>> axis.configure(0, 40)
        >>> axis.shares
        [40, 20, 20, 20]
    """

    def __init__(self, length: int = 5) -> None:
        self._cells: list[Cell] = []
        self.resize(length)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> Cell:
        self._check_index(index)
        return self._cells[index]

    def __repr__(self) -> str:
        cells = ", ".join(
            f"{c.share}{'*' if c.pinned else ''}" for c in self._cells
        )
        return f"Axis([{cells}])"

    @property
    def cells(self) -> list[Cell]:
        """Copies of the current cells, in order."""
        return [cell.copy() for cell in self._cells]

    @property
    def shares(self) -> list[int]:
        return [cell.share for cell in self._cells]

    @property
    def total(self) -> int:
        """Sum of all shares; 100 or less after floor redistribution."""
        return sum(cell.share for cell in self._cells)

    @property
    def slack(self) -> int:
        """Percent not covered by any cell."""
        return FULL_SHARE - self.total

    @property
    def reserved(self) -> int:
        """Sum of the pinned shares."""
        return sum(cell.share for cell in self._cells if cell.pinned)

    @property
    def flex_count(self) -> int:
        return sum(1 for cell in self._cells if not cell.pinned)

    def resize(self, length: int) -> None:
        """
        Replace every cell with ``length`` equal, unpinned cells.

        Each cell gets ``100 // length``. Pins are discarded.
        """
        if length < 1:
            raise InvalidLengthError(length)
        share = FULL_SHARE // length
        self._cells = [Cell(share=share) for _ in range(length)]
        logger.debug("Axis resized to %d cells of %d%%", length, share)

    def configure(self, index: int, percent: int) -> None:
        """
        Pin the cell at 0-based ``index`` to ``percent`` and redistribute.

        If the new pin would push the pinned total above 100 the cell is
        restored and ``OverAllocationError`` is raised.
        """
        self._check_index(index)
        if not 0 <= percent <= FULL_SHARE:
            raise InvalidPercentError(percent)

        previous = self._cells[index]
        self._cells[index] = Cell(share=percent, pinned=True)
        try:
            self.redistribute()
        except OverAllocationError:
            self._cells[index] = previous
            raise

    def release(self, index: int) -> None:
        """Unpin the cell at ``index`` so it shares the leftover again."""
        self._check_index(index)
        self._cells[index] = Cell(share=self._cells[index].share)
        self.redistribute()

    def redistribute(self) -> None:
        """
        Give every flexible cell an equal floor share of what is unpinned.

        Deterministic: running it twice without a configure in between
        leaves the axis unchanged.
        """
        reserved = self.reserved
        if reserved > FULL_SHARE:
            raise OverAllocationError(reserved)

        remaining = FULL_SHARE - reserved
        flex_count = self.flex_count

        if flex_count == 0:
            if remaining != 0:
                logger.warning(
                    "All %d cells are pinned but only cover %d%%; "
                    "%d%% is left unassigned",
                    len(self._cells), reserved, remaining,
                )
            return

        equal_share = remaining // flex_count
        for i, cell in enumerate(self._cells):
            if not cell.pinned:
                self._cells[i] = Cell(share=equal_share)

        logger.debug(
            "Redistributed %d%% over %d flexible cells: %d%% each",
            remaining, flex_count, equal_share,
        )

    def offset(self, position: int) -> int:
        """
        Percent offset of the 1-based ``position``'s leading edge.

        The offset starts at 1 and adds the shares of cells 2 through
        ``position``.
        """
        self.check_position(position)
        return 1 + sum(cell.share for cell in self._cells[1:position])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise IndexOutOfRangeError(index, len(self._cells))

    def check_position(self, position: int) -> None:
        """Raise IndexOutOfRangeError unless 1 <= position <= len(self)."""
        if not 1 <= position <= len(self._cells):
            raise IndexOutOfRangeError(position, len(self._cells), one_based=True)
