"""Low-level terminal operations used by the window."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from gridterm.cli.core.constants import CSI, RESET

logger = logging.getLogger(__name__)

FALLBACK_COLS = 80
FALLBACK_ROWS = 24


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions in character cells."""
    cols: int
    rows: int


class Terminal:
    """Terminal I/O for the window. All output goes to ``sys.stdout``."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions, 80x24 when not attached to a tty."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.columns, size.lines)
        except OSError:
            return TerminalSize(FALLBACK_COLS, FALLBACK_ROWS)

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        Terminal.write(f'{CSI}2J{CSI}H')

    @staticmethod
    def move_to(row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        Terminal.write(f'{CSI}{row};{col}H')

    @staticmethod
    def write_at(row: int, col: int, lines: list[str]) -> None:
        """Write ``lines`` one below the other, starting at (row, col)."""
        out = ''.join(
            f'{CSI}{row + i};{col}H{line}' for i, line in enumerate(lines)
        )
        Terminal.write(out)

    @staticmethod
    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Raw keyboard input for the duration of the block (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            logger.debug("termios unavailable, staying in cooked mode")
            yield
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use the alternate screen buffer, restoring the main one on exit."""
        Terminal.write(f'{CSI}?1049h')
        try:
            yield
        finally:
            Terminal.write(f'{CSI}?1049l')

    @staticmethod
    @contextmanager
    def hidden_cursor() -> Iterator[None]:
        Terminal.write(f'{CSI}?25l')
        try:
            yield
        finally:
            Terminal.write(f'{CSI}?25h')

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Alternate screen, hidden cursor and raw input, released on any exit."""
        with Terminal.alternate_screen(), Terminal.hidden_cursor():
            try:
                with Terminal.raw_mode():
                    yield
            finally:
                Terminal.write(RESET)
