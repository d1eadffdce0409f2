"""Tests for Cell and Axis redistribution."""

import logging

import pytest

from gridterm.core.axis import Axis
from gridterm.core.cell import Cell
from gridterm.core.errors import (
    IndexOutOfRangeError,
    InvalidLengthError,
    InvalidPercentError,
    LayoutError,
    OverAllocationError,
)


class TestCell:
    """Tests for Cell dataclass."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.share == 0
        assert cell.pinned is False
        assert cell.is_flexible() is True

    def test_cell_copy(self) -> None:
        cell = Cell(share=40, pinned=True)
        copy = cell.copy()
        assert copy == cell
        assert copy is not cell
        assert copy.is_flexible() is False


class TestResize:
    """Tests for equal splits."""

    def test_default_axis(self) -> None:
        axis = Axis()
        assert len(axis) == 5
        assert axis.shares == [20, 20, 20, 20, 20]
        assert not any(cell.pinned for cell in axis)

    def test_resize_floors_share(self) -> None:
        axis = Axis()
        axis.resize(3)
        assert axis.shares == [33, 33, 33]
        assert axis.total == 99
        assert axis.slack == 1

    def test_resize_drops_pins(self) -> None:
        axis = Axis(4)
        axis.configure(0, 70)
        axis.resize(2)
        assert axis.shares == [50, 50]
        assert axis.flex_count == 2

    def test_resize_zero_rejected(self) -> None:
        axis = Axis(4)
        with pytest.raises(InvalidLengthError):
            axis.resize(0)
        assert axis.shares == [25, 25, 25, 25]

    def test_construct_zero_rejected(self) -> None:
        with pytest.raises(InvalidLengthError):
            Axis(0)

    def test_errors_are_layout_errors(self) -> None:
        with pytest.raises(LayoutError):
            Axis(-1)
        with pytest.raises(ValueError):
            Axis(0)


class TestConfigure:
    """Tests for pinning cells."""

    def test_configure_pins_cell(self) -> None:
        axis = Axis(5)
        axis.configure(1, 40)
        assert axis[1].share == 40
        assert axis[1].pinned is True
        assert axis.shares == [15, 40, 15, 15, 15]
        assert axis.total == 100

    def test_pinned_survives_other_configure(self) -> None:
        axis = Axis(4)
        axis.configure(0, 30)
        axis.configure(2, 20)
        assert axis[0].share == 30
        assert axis[0].pinned is True
        assert axis.shares == [30, 25, 20, 25]

    def test_reconfigure_same_cell(self) -> None:
        axis = Axis(3)
        axis.configure(0, 50)
        axis.configure(0, 20)
        assert axis.shares == [20, 40, 40]

    @pytest.mark.parametrize(
        "length,percent,flex_share,total",
        [
            (5, 30, 17, 98),
            (4, 50, 16, 98),
            (10, 5, 10, 95),
            (3, 10, 45, 100),
        ],
    )
    def test_floor_and_drop(self, length: int, percent: int, flex_share: int, total: int) -> None:
        axis = Axis(length)
        axis.configure(0, percent)
        assert all(cell.share == flex_share for cell in axis if not cell.pinned)
        assert flex_share == (100 - percent) // (length - 1)
        assert axis.total == total

    def test_index_out_of_range(self) -> None:
        axis = Axis(5)
        with pytest.raises(IndexOutOfRangeError):
            axis.configure(5, 10)
        with pytest.raises(IndexOutOfRangeError):
            axis.configure(-1, 10)
        assert axis.shares == [20, 20, 20, 20, 20]

    def test_index_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            Axis(2)[2]

    @pytest.mark.parametrize("percent", [-1, 101])
    def test_invalid_percent(self, percent: int) -> None:
        axis = Axis(5)
        with pytest.raises(InvalidPercentError):
            axis.configure(0, percent)
        assert axis.flex_count == 5

    def test_over_allocation_rejected(self) -> None:
        axis = Axis(5)
        axis.configure(0, 60)
        before = axis.cells
        with pytest.raises(OverAllocationError) as exc_info:
            axis.configure(1, 50)
        assert exc_info.value.reserved == 110
        assert axis.cells == before
        assert axis[1].pinned is False

    def test_release(self) -> None:
        axis = Axis(4)
        axis.configure(0, 40)
        assert axis.shares == [40, 20, 20, 20]
        axis.release(0)
        assert axis.shares == [25, 25, 25, 25]
        assert axis.flex_count == 4


class TestRedistribute:
    """Tests for the redistribution pass itself."""

    def test_idempotent(self) -> None:
        axis = Axis(6)
        axis.configure(2, 35)
        axis.configure(4, 10)
        first = axis.cells
        axis.redistribute()
        assert axis.cells == first
        axis.redistribute()
        assert axis.cells == first

    def test_fully_pinned_short_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        axis = Axis(2)
        axis.configure(0, 30)
        assert axis.shares == [30, 70]
        with caplog.at_level(logging.WARNING, logger="gridterm.core.axis"):
            axis.configure(1, 30)
        assert axis.shares == [30, 30]
        assert axis.slack == 40
        assert "pinned" in caplog.text

    def test_fully_pinned_exact_is_quiet(self, caplog: pytest.LogCaptureFixture) -> None:
        axis = Axis(2)
        with caplog.at_level(logging.WARNING, logger="gridterm.core.axis"):
            axis.configure(0, 60)
            axis.configure(1, 40)
        assert axis.shares == [60, 40]
        assert caplog.records == []

    def test_pin_everything_to_full(self) -> None:
        axis = Axis(3)
        axis.configure(0, 100)
        assert axis.shares == [100, 0, 0]
        assert axis.reserved == 100


class TestOffset:
    """Tests for 1-based percent offsets."""

    def test_offsets_start_at_one(self) -> None:
        axis = Axis(5)
        assert [axis.offset(p) for p in range(1, 6)] == [1, 21, 41, 61, 81]

    def test_offset_skips_first_cell(self) -> None:
        axis = Axis(3)
        axis.configure(0, 50)
        assert axis.shares == [50, 25, 25]
        assert axis.offset(1) == 1
        assert axis.offset(2) == 26
        assert axis.offset(3) == 51

    @pytest.mark.parametrize("position", [0, 6])
    def test_offset_out_of_range(self, position: int) -> None:
        with pytest.raises(IndexOutOfRangeError):
            Axis(5).offset(position)
