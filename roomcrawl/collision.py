"""Layer-based collision detection with begin, overlap and end notifications."""

from __future__ import annotations

from itertools import combinations, product
from typing import Any, Callable, Protocol, Sequence

from roomcrawl.core import Vec2

_MASK32 = 0xFFFFFFFF


class Collider(Protocol):
    """What the collision manager needs from a collider."""

    @property
    def id(self) -> int: ...

    owner: Any
    final_pos: Vec2
    scale: Vec2

    def begin_overlap(self, other: Collider) -> None: ...

    def overlap(self, other: Collider) -> None: ...

    def end_overlap(self, other: Collider) -> None: ...


def collision_id(left_id: int, right_id: int) -> int:
    """Pack two 32-bit collider ids into one 64-bit key, left in the low half."""
    return ((right_id & _MASK32) << 32) | (left_id & _MASK32)


def is_collision(left: Collider, right: Collider) -> bool:
    """True when the two axis-aligned boxes, centred on their final positions, overlap."""
    diff = left.final_pos - right.final_pos
    return (
        abs(diff.x) < (left.scale.x + right.scale.x) / 2.0
        and abs(diff.y) < (left.scale.y + right.scale.y) / 2.0
    )


def _owner_dead(collider: Collider) -> bool:
    owner = collider.owner
    return owner is not None and bool(owner.is_dead)


class CollisionManager:
    """Tracks which layer pairs collide and which collider pairs currently overlap."""

    def __init__(self, layer_count: int) -> None:
        if layer_count <= 0:
            raise ValueError("layer_count must be positive")
        self._layer_count = layer_count
        self._matrix = [0] * layer_count
        self._overlapping: dict[int, bool] = {}

    @property
    def layer_count(self) -> int:
        return self._layer_count

    def _cell(self, left: int, right: int) -> tuple[int, int]:
        row, col = int(left), int(right)
        for layer in (row, col):
            if not 0 <= layer < self._layer_count:
                raise ValueError(f"layer {layer} out of range")
        return (row, col) if row <= col else (col, row)

    def toggle(self, left: int, right: int) -> None:
        """Switch collision checking between two layers on or off."""
        row, col = self._cell(left, right)
        self._matrix[row] ^= 1 << col

    def is_checked(self, left: int, right: int) -> bool:
        row, col = self._cell(left, right)
        return bool(self._matrix[row] >> col & 1)

    def clear(self) -> None:
        """Turn off every layer pair and forget all overlap history."""
        self._matrix = [0] * self._layer_count
        self._overlapping.clear()

    def tick(self, colliders_for_layer: Callable[[int], Sequence[Collider]]) -> None:
        """Test every checked layer pair, notifying colliders of changes in overlap."""
        for row in range(self._layer_count):
            for col in range(row, self._layer_count):
                if self._matrix[row] >> col & 1:
                    self._collide_layers(row, col, colliders_for_layer)

    def _collide_layers(
        self,
        left: int,
        right: int,
        colliders_for_layer: Callable[[int], Sequence[Collider]],
    ) -> None:
        left_colliders = list(colliders_for_layer(left))
        if left != right:
            pairs = product(left_colliders, list(colliders_for_layer(right)))
        else:
            pairs = combinations(left_colliders, 2)
        for left_col, right_col in pairs:
            self._collide_pair(left_col, right_col)

    def _collide_pair(self, left: Collider, right: Collider) -> None:
        key = collision_id(left.id, right.id)
        was_overlapping = self._overlapping.setdefault(key, False)
        dead = _owner_dead(left) or _owner_dead(right)

        if not dead and is_collision(left, right):
            if was_overlapping:
                left.overlap(right)
                right.overlap(left)
            else:
                left.begin_overlap(right)
                right.begin_overlap(left)
                self._overlapping[key] = True
        elif was_overlapping:
            left.end_overlap(right)
            right.end_overlap(left)
            self._overlapping[key] = False