"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from gridterm.cli.core.input import KeyEvent


@dataclass(frozen=True)
class Rect:
    """Widget bounds in characters; ``x``/``y`` are 1-based terminal coordinates."""
    x: int
    y: int
    width: int
    height: int


@runtime_checkable
class Widget(Protocol):
    """Protocol for anything the window can place and draw."""

    def render(self, bounds: Rect) -> list[str]:
        """Render widget content as at most ``bounds.height`` lines."""
        ...

    def handle_input(self, event: KeyEvent) -> bool:
        """Handle input event. Returns True if consumed."""
        ...


class BaseWidget(ABC):
    """Base class with common widget functionality."""

    def __init__(self) -> None:
        self._visible = True

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Subclasses must implement rendering."""
        pass

    def handle_input(self, event: KeyEvent) -> bool:
        """Default: don't consume events."""
        return False
