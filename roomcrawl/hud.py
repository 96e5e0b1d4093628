"""Heads-up display pieces: the heart health bar and clickable buttons."""

from __future__ import annotations

import enum
from typing import Any, Callable

from roomcrawl.core import Base, Vec2

HEART_ORIGIN = Vec2(20.0, 20.0)
HEART_SPACING = 50.0
HEART_SIZE = Vec2(50.0, 50.0)


class Heart(enum.Enum):
    FULL = "full"
    HALF = "half"
    EMPTY = "empty"


def heart_slots(max_hp: int, cur_hp: int) -> list[Heart]:
    """Hearts to draw: two hit points per heart, a half heart for an odd remainder."""
    if max_hp < 0 or cur_hp < 0:
        raise ValueError("hit points must not be negative")
    heart_count = max_hp // 2 + max_hp % 2
    full_count = cur_hp // 2
    has_half = cur_hp % 2 == 1

    slots = []
    for slot in range(heart_count):
        if slot < full_count:
            slots.append(Heart.FULL)
        elif has_half and slot == full_count:
            slots.append(Heart.HALF)
        else:
            slots.append(Heart.EMPTY)
    return slots


def heart_positions(
    max_hp: int, origin: Vec2 = HEART_ORIGIN, spacing: float = HEART_SPACING
) -> list[Vec2]:
    """Top-left corner of each heart, laid out left to right."""
    if max_hp < 0:
        raise ValueError("hit points must not be negative")
    heart_count = max_hp // 2 + max_hp % 2
    return [Vec2(origin.x + slot * spacing, origin.y) for slot in range(heart_count)]


class Button(Base):
    """A rectangular UI button that runs a callback and a bound method when clicked."""

    def __init__(self, pos: Vec2 = Vec2(0.0, 0.0), scale: Vec2 = Vec2(0.0, 0.0)) -> None:
        super().__init__()
        self.pos = pos
        self.scale = scale
        self.sprite: Any = None
        self._callback: Callable[[], Any] | None = None
        self._instance: Any = None
        self._method: Callable[[Any], Any] | None = None

    def add_callback(self, callback: Callable[[], Any]) -> None:
        """Set the plain function run on click."""
        self._callback = callback

    def add_delegate(self, instance: Any, method: Callable[[Any], Any]) -> None:
        """Set a method, called with ``instance`` as its argument, run on click."""
        self._instance = instance
        self._method = method

    def contains(self, point: Vec2) -> bool:
        return (
            self.pos.x <= point.x < self.pos.x + self.scale.x
            and self.pos.y <= point.y < self.pos.y + self.scale.y
        )

    def click(self) -> None:
        """Run the callback, then the delegate, whichever are set."""
        if self._callback is not None:
            self._callback()
        if self._instance is not None and self._method is not None:
            self._method(self._instance)