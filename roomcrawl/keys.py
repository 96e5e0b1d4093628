"""Keyboard and mouse state tracked frame by frame."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Collection

from roomcrawl.core import Vec2


class KeyState(enum.Enum):
    NONE = 0
    TAP = 1
    PRESSED = 2
    RELEASED = 3


class Key(enum.IntEnum):
    Q = 0
    W = enum.auto()
    E = enum.auto()
    R = enum.auto()
    T = enum.auto()
    Y = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    Z = enum.auto()
    X = enum.auto()
    C = enum.auto()
    V = enum.auto()
    B = enum.auto()
    N = enum.auto()
    M = enum.auto()
    U = enum.auto()
    J = enum.auto()
    K = enum.auto()
    ENTER = enum.auto()
    ESC = enum.auto()
    LSHIFT = enum.auto()
    ALT = enum.auto()
    CTRL = enum.auto()
    SPACE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    NUM0 = enum.auto()
    NUM1 = enum.auto()
    NUM2 = enum.auto()
    NUM3 = enum.auto()
    NUM4 = enum.auto()
    NUM5 = enum.auto()
    NUM6 = enum.auto()
    NUM7 = enum.auto()
    NUM8 = enum.auto()
    NUM9 = enum.auto()
    LBTN = enum.auto()
    RBTN = enum.auto()


@dataclass
class _KeyInfo:
    state: KeyState = KeyState.NONE
    prev_pressed: bool = False


_OFF_SCREEN = Vec2(-1.0, -1.0)


class KeyManager:
    """Turns the set of keys held down each frame into tap, hold and release states."""

    def __init__(self) -> None:
        self._info = {key: _KeyInfo() for key in Key}
        self._mouse_pos = Vec2(0.0, 0.0)

    @property
    def mouse_pos(self) -> Vec2:
        return self._mouse_pos

    def state(self, key: Key) -> KeyState:
        return self._info[key].state

    def tapped(self, key: Key) -> bool:
        return self.state(key) is KeyState.TAP

    def held(self, key: Key) -> bool:
        return self.state(key) is KeyState.PRESSED

    def released(self, key: Key) -> bool:
        return self.state(key) is KeyState.RELEASED

    def tick(
        self,
        focused: bool,
        pressed: Collection[Key] = (),
        mouse_pos: Vec2 | None = None,
    ) -> None:
        """Advance one frame given window focus, the keys held down and the cursor."""
        if focused:
            down = set(pressed)
            for key, info in self._info.items():
                if key in down:
                    info.state = KeyState.PRESSED if info.prev_pressed else KeyState.TAP
                    info.prev_pressed = True
                else:
                    info.state = KeyState.RELEASED if info.prev_pressed else KeyState.NONE
                    info.prev_pressed = False
            if mouse_pos is not None:
                self._mouse_pos = mouse_pos
        else:
            for info in self._info.values():
                if info.state in (KeyState.TAP, KeyState.PRESSED):
                    info.state = KeyState.RELEASED
                elif info.state is KeyState.RELEASED:
                    info.state = KeyState.NONE
                info.prev_pressed = False
            self._mouse_pos = _OFF_SCREEN

    def is_mouse_off_screen(self, resolution: Vec2) -> bool:
        pos = self._mouse_pos
        return (
            resolution.x <= pos.x
            or resolution.y <= pos.y
            or pos.x < 0
            or pos.y < 0
        )