"""Keyboard input decoding for the window's event loop."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    CTRL_C = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None

    @property
    def is_interrupt(self) -> bool:
        return self.key == Key.CTRL_C


class InputReader:
    """
    Non-blocking keyboard reader.

    Reads with ``os.read()`` so escape sequences split across reads are
    reassembled in an internal buffer. In raw mode Ctrl-C arrives as a
    plain byte and is reported as ``Key.CTRL_C``.
    """

    # Escape sequences without the leading \x1b
    SEQUENCES: dict[str, Key] = {
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
        '[3~': Key.DELETE,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
        '\x03': Key.CTRL_C,
    }

    ESCAPE_WAIT = 0.1

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input arrives within ``timeout`` seconds.
        """
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()
        if self._buffer:
            return self._process_buffer()
        return None

    def _read_available(self) -> None:
        try:
            data = os.read(self._fd, 1024)
            self._buffer += data.decode('utf-8', errors='replace')
        except (OSError, BlockingIOError):
            pass

        # A lone escape may be the start of a sequence still in flight
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        deadline = time.monotonic() + self.ESCAPE_WAIT
        while (remaining := deadline - time.monotonic()) > 0:
            if not self._has_input(min(remaining, 0.025)):
                continue
            try:
                data = os.read(self._fd, 1024)
                self._buffer += data.decode('utf-8', errors='replace')
            except (OSError, BlockingIOError):
                pass
            rest = self._buffer[1:]
            if rest and (rest[-1].isalpha() or rest[-1] == '~'):
                return

    def _process_buffer(self) -> Optional[KeyEvent]:
        ch = self._buffer[0]

        if ch in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[ch], raw=ch)

        if ch == '\x1b':
            return self._parse_escape_sequence()

        self._buffer = self._buffer[1:]
        if ch.isprintable():
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        rest = self._buffer[1:]

        end_idx = 0
        if rest[:1] == 'O' and len(rest) > 1:
            # SS3: exactly one final character follows the O
            end_idx = 2
        else:
            for i, ch in enumerate(rest):
                if ch == '\x1b':
                    end_idx = i
                    break
                if ch.isalpha() or ch == '~':
                    end_idx = i + 1
                    break
                end_idx = i + 1

        if end_idx == 0:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        self._buffer = self._buffer[1 + end_idx:]
        return KeyEvent(key=self.SEQUENCES.get(seq), raw='\x1b' + seq)

    def _has_input(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
