"""Widgets and the registry the window keeps them in."""

from gridterm.cli.widgets.base import Widget, BaseWidget, Rect
from gridterm.cli.widgets.label import Label
from gridterm.cli.widgets.registry import (
    WidgetRegistry,
    WidgetHandle,
    GridPlacement,
    AbsolutePlacement,
    Placement,
)

__all__ = [
    "Widget",
    "BaseWidget",
    "Rect",
    "Label",
    "WidgetRegistry",
    "WidgetHandle",
    "GridPlacement",
    "AbsolutePlacement",
    "Placement",
]
