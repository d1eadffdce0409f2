"""Tests for themes, box primitives, the label widget and the registry."""

import re

import pytest

from gridterm.cli.core.boxes import border_box, fill_box
from gridterm.cli.core.constants import RESET
from gridterm.cli.core.input import Key, KeyEvent
from gridterm.cli.core.theme import Theme, default_theme
from gridterm.cli.widgets.base import BaseWidget, Rect, Widget
from gridterm.cli.widgets.label import Label
from gridterm.cli.widgets.registry import (
    AbsolutePlacement,
    GridPlacement,
    WidgetHandle,
    WidgetRegistry,
)


def _visible(s: str) -> str:
    """Strip SGR codes, keeping only visible characters."""
    return re.sub(r'\x1b\[[0-9;]*m', '', s)


class TestTheme:
    """Tests for Theme."""

    def test_default_theme(self) -> None:
        theme = default_theme()
        assert theme.fg == (255, 255, 255)
        assert theme.bg == (0, 0, 0)

    def test_sgr(self) -> None:
        theme = Theme(fg=(255, 128, 0), bg=(1, 2, 3))
        assert theme.to_sgr_fg() == "38;2;255;128;0"
        assert theme.to_sgr_bg() == "48;2;1;2;3"

    def test_paint(self) -> None:
        painted = Theme().paint("hi")
        assert painted.startswith("\x1b[38;2;255;255;255;48;2;0;0;0m")
        assert painted.endswith(RESET)
        assert _visible(painted) == "hi"

    @pytest.mark.parametrize("fg", [(256, 0, 0), (-1, 0, 0), (0, 0)])
    def test_invalid_rgb(self, fg: tuple) -> None:
        with pytest.raises(ValueError):
            Theme(fg=fg)

    def test_with_colors(self) -> None:
        theme = Theme().with_fg(10, 20, 30).with_bg(40, 50, 60)
        assert theme == Theme(fg=(10, 20, 30), bg=(40, 50, 60))


class TestBoxes:
    """Tests for border and fill boxes."""

    def test_border_box(self) -> None:
        lines = border_box(4, 3, Theme())
        assert [_visible(line) for line in lines] == ["┌──┐", "│  │", "└──┘"]

    def test_too_small_for_border(self) -> None:
        lines = border_box(1, 3, Theme())
        assert [_visible(line) for line in lines] == [" ", " ", " "]

    def test_fill_box(self) -> None:
        lines = fill_box(3, 2, Theme())
        assert [_visible(line) for line in lines] == ["   ", "   "]

    def test_empty_fill(self) -> None:
        assert fill_box(0, 3, Theme()) == []
        assert fill_box(3, 0, Theme()) == []


class TestLabel:
    """Tests for Label rendering."""

    def test_is_widget(self) -> None:
        assert isinstance(Label(), Widget)

    def test_bordered(self) -> None:
        lines = Label("Hi").render(Rect(1, 1, 6, 3))
        assert [_visible(line) for line in lines] == ["┌────┐", "│Hi  │", "└────┘"]

    def test_unbordered_truncates(self) -> None:
        lines = Label("Hello world", border=False).render(Rect(1, 1, 5, 2))
        assert [_visible(line) for line in lines] == ["Hello", "     "]

    def test_border_without_room_for_text(self) -> None:
        lines = Label("Hi").render(Rect(1, 1, 5, 2))
        assert [_visible(line) for line in lines] == ["┌───┐", "└───┘"]

    def test_hidden(self) -> None:
        label = Label("Hi")
        label.visible = False
        assert label.render(Rect(1, 1, 6, 3)) == []

    def test_set_text(self) -> None:
        label = Label("old", border=False)
        label.set_text("new")
        assert _visible(label.render(Rect(1, 1, 3, 1))[0]) == "new"

    def test_ignores_input(self) -> None:
        assert Label().handle_input(KeyEvent(key=Key.ENTER)) is False


class _Dummy(BaseWidget):
    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def render(self, bounds: Rect) -> list[str]:
        return [self.name]


class TestPlacement:
    """Tests for placement validation."""

    def test_grid_placement_defaults(self) -> None:
        placement = GridPlacement(2, 3)
        assert (placement.column_span, placement.row_span) == (1, 1)

    @pytest.mark.parametrize(
        "args",
        [(0, 1), (1, 0), (1, 1, 0, 1), (1, 1, 1, 0)],
    )
    def test_invalid_grid_placement(self, args: tuple) -> None:
        with pytest.raises(ValueError):
            GridPlacement(*args)


class TestRegistry:
    """Tests for the handle-addressed widget arena."""

    def test_add_and_get(self) -> None:
        registry = WidgetRegistry()
        widget = _Dummy("a")
        handle = registry.add(widget, GridPlacement(1, 1))
        assert handle == WidgetHandle(0, 0)
        assert registry.get(handle) is widget
        assert registry.placement(handle) == GridPlacement(1, 1)
        assert len(registry) == 1
        assert handle in registry

    def test_iteration_order(self) -> None:
        registry = WidgetRegistry()
        for name in "abc":
            registry.add(_Dummy(name), GridPlacement(1, 1))
        assert [w.name for _, w, _ in registry] == ["a", "b", "c"]

    def test_iteration_order_after_slot_reuse(self) -> None:
        registry = WidgetRegistry()
        first = registry.add(_Dummy("a"), GridPlacement(1, 1))
        registry.add(_Dummy("b"), GridPlacement(2, 1))
        registry.remove(first)
        reused = registry.add(_Dummy("c"), GridPlacement(3, 1))
        assert reused.index == first.index
        assert [w.name for _, w, _ in registry] == ["b", "c"]
        assert [h for h, _, _ in registry][1] == reused

    def test_remove_invalidates_handle(self) -> None:
        registry = WidgetRegistry()
        handle = registry.add(_Dummy("a"), GridPlacement(1, 1))
        removed = registry.remove(handle)
        assert removed.name == "a"
        assert len(registry) == 0
        assert handle not in registry
        with pytest.raises(KeyError):
            registry.get(handle)
        with pytest.raises(KeyError):
            registry.remove(handle)

    def test_slot_reuse_bumps_generation(self) -> None:
        registry = WidgetRegistry()
        old = registry.add(_Dummy("a"), GridPlacement(1, 1))
        registry.add(_Dummy("b"), GridPlacement(2, 1))
        registry.remove(old)
        new = registry.add(_Dummy("c"), GridPlacement(3, 1))
        assert new == WidgetHandle(0, 1)
        assert registry.get(new).name == "c"
        with pytest.raises(KeyError):
            registry.get(old)

    def test_replace_keeps_placement(self) -> None:
        registry = WidgetRegistry()
        handle = registry.add(_Dummy("a"), AbsolutePlacement(1, 1, 5, 5))
        old = registry.replace(handle, _Dummy("b"))
        assert old.name == "a"
        assert registry.get(handle).name == "b"
        assert registry.placement(handle) == AbsolutePlacement(1, 1, 5, 5)

    def test_move(self) -> None:
        registry = WidgetRegistry()
        handle = registry.add(_Dummy("a"), GridPlacement(1, 1))
        registry.move(handle, GridPlacement(2, 2, column_span=2))
        assert registry.placement(handle) == GridPlacement(2, 2, 2, 1)

    def test_unknown_handle(self) -> None:
        registry = WidgetRegistry()
        with pytest.raises(KeyError):
            registry.get(WidgetHandle(3, 0))
        assert "not a handle" not in registry
