"""Widget registry - child widgets addressed by stable handles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from gridterm.cli.widgets.base import Widget


@dataclass(frozen=True)
class WidgetHandle:
    """
    Stable reference to a registered widget.

    ``generation`` changes every time a slot is reused, so a handle to a
    removed widget never resolves to its replacement.
    """
    index: int
    generation: int


@dataclass(frozen=True)
class GridPlacement:
    """A 1-based grid cell plus how many columns/rows the widget spans."""
    column: int
    row: int
    column_span: int = 1
    row_span: int = 1

    def __post_init__(self) -> None:
        if self.column < 1 or self.row < 1:
            raise ValueError(f"Grid placement is 1-based, got ({self.column}, {self.row})")
        if self.column_span < 1 or self.row_span < 1:
            raise ValueError(
                f"Spans must be at least 1, got {self.column_span}x{self.row_span}"
            )


@dataclass(frozen=True)
class AbsolutePlacement:
    """A fixed character rectangle that ignores the grid."""
    x: int
    y: int
    width: int
    height: int


Placement = Union[GridPlacement, AbsolutePlacement]


@dataclass
class _Slot:
    generation: int = 0
    order: int = 0
    widget: Optional[Widget] = None
    placement: Optional[Placement] = None

    @property
    def occupied(self) -> bool:
        return self.widget is not None


class WidgetRegistry:
    """
    Arena of child widgets.

    Removing a widget frees its slot for reuse; handles held for the old
    widget raise ``KeyError`` from then on. Iteration follows insertion
    order, even when a newer widget lands in an older, freed slot.
    """

    def __init__(self) -> None:
        self._slots: list[_Slot] = []
        self._free: list[int] = []
        self._added = 0

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot.occupied)

    def __contains__(self, handle: object) -> bool:
        if not isinstance(handle, WidgetHandle):
            return False
        try:
            self._slot(handle)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[tuple[WidgetHandle, Widget, Placement]]:
        occupied = [(index, slot) for index, slot in enumerate(self._slots) if slot.occupied]
        for index, slot in sorted(occupied, key=lambda item: item[1].order):
            assert slot.widget is not None and slot.placement is not None
            yield WidgetHandle(index, slot.generation), slot.widget, slot.placement

    def add(self, widget: Widget, placement: Placement) -> WidgetHandle:
        if self._free:
            index = self._free.pop(0)
            slot = self._slots[index]
        else:
            index = len(self._slots)
            slot = _Slot()
            self._slots.append(slot)
        slot.widget = widget
        slot.placement = placement
        slot.order = self._added
        self._added += 1
        return WidgetHandle(index, slot.generation)

    def get(self, handle: WidgetHandle) -> Widget:
        widget = self._slot(handle).widget
        assert widget is not None
        return widget

    def placement(self, handle: WidgetHandle) -> Placement:
        placement = self._slot(handle).placement
        assert placement is not None
        return placement

    def replace(self, handle: WidgetHandle, widget: Widget) -> Widget:
        """Swap in ``widget`` at the same placement, returning the old one."""
        slot = self._slot(handle)
        old = slot.widget
        assert old is not None
        slot.widget = widget
        return old

    def move(self, handle: WidgetHandle, placement: Placement) -> None:
        self._slot(handle).placement = placement

    def remove(self, handle: WidgetHandle) -> Widget:
        slot = self._slot(handle)
        widget = slot.widget
        assert widget is not None
        slot.widget = None
        slot.placement = None
        slot.generation += 1
        self._free.append(handle.index)
        self._free.sort()
        return widget

    def _slot(self, handle: WidgetHandle) -> _Slot:
        if not 0 <= handle.index < len(self._slots):
            raise KeyError(handle)
        slot = self._slots[handle.index]
        if not slot.occupied or slot.generation != handle.generation:
            raise KeyError(handle)
        return slot
