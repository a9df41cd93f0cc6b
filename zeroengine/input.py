"""Keyboard and cursor state tracked across frames."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Union

from zeroengine.geometry import Vec2

VK_LBUTTON = 0x01
VK_RETURN = 0x0D
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

KEY_COUNT = 256

Key = Union[int, str]


class KeyState(IntEnum):
    NONE = -1
    DOWN = 0
    UP = 1
    PRESS = 2


def _code(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"key must be a single character, got {key!r}")
        key = ord(key)
    code = int(key)
    if not 0 <= code < KEY_COUNT:
        raise ValueError(f"key code out of range: {code}")
    return code


class InputManager:
    """Compares the keys held this frame with those held the frame before."""

    def __init__(self) -> None:
        self._current: frozenset[int] = frozenset()
        self._last: frozenset[int] = frozenset()
        self.cursor_pos = Vec2(0.0, 0.0)

    def update(self, pressed_keys: Iterable[Key], cursor_pos) -> None:
        """Advance one frame with the keys now held and the cursor position."""
        current = frozenset(_code(k) for k in pressed_keys)
        self._last = self._current
        self._current = current
        self.cursor_pos = Vec2(*cursor_pos)

    def key_state(self, key: Key) -> KeyState:
        code = _code(key)
        now = code in self._current
        before = code in self._last
        if now and before:
            return KeyState.PRESS
        if now:
            return KeyState.DOWN
        if before:
            return KeyState.UP
        return KeyState.NONE