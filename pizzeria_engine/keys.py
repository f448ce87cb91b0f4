"""Keyboard and mouse state tracking with tap/hold/away transitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from pizzeria_engine.vector import Vector2


class KeyState(Enum):
    TAP = auto()
    HOLD = auto()
    AWAY = auto()
    NONE = auto()


class Key(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    Q = auto()
    W = auto()
    E = auto()
    R = auto()
    T = auto()
    Y = auto()
    U = auto()
    O = auto()
    P = auto()
    A = auto()
    S = auto()
    D = auto()
    F = auto()
    G = auto()
    Z = auto()
    X = auto()
    C = auto()
    V = auto()
    B = auto()
    ALT = auto()
    CTRL = auto()
    LSHIFT = auto()
    SPACE = auto()
    ENTER = auto()
    ESC = auto()
    LBTN = auto()
    RBTN = auto()


ARROW_KEYS = frozenset({Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN})
MOVEMENT_KEYS = ARROW_KEYS | {Key.SPACE, Key.Z}

# The game's Z action is bound to the physical left shift key.
_PHYSICAL_KEY = {Key.Z: Key.LSHIFT}


@dataclass
class _KeyInfo:
    state: KeyState = KeyState.NONE
    was_pressed: bool = False


class KeyManager:
    """Tracks per-frame key states from a ``poll(key) -> bool`` callable."""

    def __init__(self, poll: Callable[[Key], bool]) -> None:
        self._poll = poll
        self._keys = {key: _KeyInfo() for key in Key}
        self.mouse_pos = Vector2()
        self._arrows_disabled = False
        self._all_disabled = False

    def _blocked(self, key: Key) -> bool:
        if self._arrows_disabled and key in ARROW_KEYS:
            return True
        return self._all_disabled and key in MOVEMENT_KEYS

    def update(self, focused: bool, mouse_pos: Vector2) -> None:
        """Advance key states by one frame; losing focus releases every key."""
        if not focused:
            self.release_keys()
            return
        for key, info in self._keys.items():
            if self._blocked(key):
                continue
            pressed = bool(self._poll(_PHYSICAL_KEY.get(key, key)))
            if pressed:
                info.state = KeyState.HOLD if info.was_pressed else KeyState.TAP
            else:
                info.state = KeyState.AWAY if info.was_pressed else KeyState.NONE
            info.was_pressed = pressed
        self.mouse_pos = Vector2(*mouse_pos)

    def key_state(self, key: Key) -> KeyState:
        return self._keys[key].state

    def is_key_state(self, key: Key, state: KeyState) -> bool:
        return self._keys[key].state is state

    def release_keys(self) -> None:
        """Move pressed keys to AWAY and AWAY keys to NONE."""
        for info in self._keys.values():
            info.was_pressed = False
            if info.state in (KeyState.TAP, KeyState.HOLD):
                info.state = KeyState.AWAY
            elif info.state is KeyState.AWAY:
                info.state = KeyState.NONE

    def disable_arrow_keys(self) -> None:
        self._arrows_disabled = True
        self._all_disabled = False

    def enable_arrow_keys(self) -> None:
        self._arrows_disabled = False
        self._all_disabled = False

    def disable_all_keys(self) -> None:
        """Ignore the arrow keys, space and Z."""
        self._arrows_disabled = False
        self._all_disabled = True

    def enable_all_keys(self) -> None:
        self._arrows_disabled = False
        self._all_disabled = False