"""Keyboard state with press and trigger queries."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable


class Key(IntEnum):
    """Keyboard scan codes used by the game."""

    ONE = 0x02
    TWO = 0x03
    THREE = 0x04
    W = 0x11
    A = 0x1E
    S = 0x1F
    D = 0x20
    SPACE = 0x39


class Keyboard:
    """Holds this frame's and last frame's pressed keys."""

    def __init__(self) -> None:
        self._current: frozenset[int] = frozenset()
        self._previous: frozenset[int] = frozenset()

    def update(self, pressed: Iterable[int]) -> None:
        """Advance one frame with the set of keys now held down."""
        self._previous = self._current
        self._current = frozenset(int(key) for key in pressed)

    def push_key(self, key: int) -> bool:
        """Whether the key is held this frame."""
        return int(key) in self._current

    def trigger_key(self, key: int) -> bool:
        """Whether the key went down this frame."""
        code = int(key)
        return code in self._current and code not in self._previous