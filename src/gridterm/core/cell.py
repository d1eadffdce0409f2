"""Cell - one row's or column's share of its axis."""

from dataclasses import dataclass


@dataclass(slots=True)
class Cell:
    """
    A single grid row or column.

    ``share`` is the percentage of the axis this cell covers. ``pinned``
    marks a share set explicitly by the caller; redistribution never
    touches pinned cells.
    """
    share: int = 0
    pinned: bool = False

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(share=self.share, pinned=self.pinned)

    def is_flexible(self) -> bool:
        """Check if this cell takes part in redistribution."""
        return not self.pinned
