"""Basic value types and the named, numbered objects everything else builds on."""

from __future__ import annotations

import copy as _copy
import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Hashable

_next_id = itertools.count()


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / size, self.y / size)

    def dot(self, other: Vec2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y


class Base:
    """An object with a name and a unique, never reused id."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._id = next(_next_id)

    @property
    def id(self) -> int:
        return self._id

    def copy(self) -> Base:
        """Shallow copy that keeps the name but receives a fresh id."""
        clone = _copy.copy(self)
        clone._id = next(_next_id)
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, id={self._id})"


class Component(Base, ABC):
    """A part attached to a game object, ticked once per frame."""

    def __init__(self, kind: Hashable) -> None:
        super().__init__()
        self._kind = kind
        self.owner: Any = None

    @property
    def kind(self) -> Hashable:
        return self._kind

    @abstractmethod
    def final_tick(self, dt: float) -> None:
        """Advance the component by ``dt`` seconds."""