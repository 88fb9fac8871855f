"""Keyboard and mouse state gathered from window events."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class Key(IntEnum):
    """Key symbols used by the controls, matching pyglet's key codes."""

    SPACE = 0x20
    A = 0x61
    D = 0x64
    S = 0x73
    W = 0x77
    ESCAPE = 0xFF1B
    LSHIFT = 0xFFE1


class Input:
    """Tracks pressed keys and a cursor position for one window.

    The cursor position is accumulated from motion deltas with y growing
    downward, so it keeps changing while the cursor is locked.
    """

    def __init__(self, window: Any = None) -> None:
        self.window = window
        self.cursor_locked = False
        self._pressed: set[int] = set()
        self._x = 0.0
        self._y = 0.0
        if window is not None:
            window.push_handlers(self)

    def key_down(self, key: int) -> bool:
        """Return True while ``key`` is held."""
        return int(key) in self._pressed

    def key_up(self, key: int) -> bool:
        """Return True while ``key`` is not held."""
        return int(key) not in self._pressed

    def set_lock_cursor(self, lock: bool) -> None:
        """Capture or release the mouse cursor."""
        self.cursor_locked = bool(lock)
        if self.window is not None:
            self.window.set_exclusive_mouse(self.cursor_locked)

    def cursor_pos(self) -> tuple[float, float]:
        """Return the current cursor position."""
        return self._x, self._y

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        self._pressed.add(int(symbol))

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        self._pressed.discard(int(symbol))

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:
        """Record mouse motion; window y grows upward, cursor y downward."""
        self._x += dx
        self._y -= dy