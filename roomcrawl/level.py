"""Levels holding objects per layer, and the manager that switches between them."""

from __future__ import annotations

from typing import Any, Hashable, Mapping, Protocol


class GameObject(Protocol):
    """What a level needs from the objects it holds."""

    name: str
    layer: int
    is_dead: bool

    def begin(self) -> None: ...

    def tick(self, dt: float) -> None: ...

    def final_tick(self, dt: float) -> None: ...

    def render(self) -> None: ...


class Level:
    """Objects and this frame's colliders, grouped by layer."""

    def __init__(self, layer_count: int) -> None:
        if layer_count <= 0:
            raise ValueError("layer_count must be positive")
        self._layer_count = layer_count
        self._objects: list[list[GameObject]] = [[] for _ in range(layer_count)]
        self._colliders: list[list[Any]] = [[] for _ in range(layer_count)]

    @property
    def layer_count(self) -> int:
        return self._layer_count

    def _layer(self, layer: int) -> int:
        index = int(layer)
        if not 0 <= index < self._layer_count:
            raise IndexError(f"layer {index} out of range")
        return index

    def _all_objects(self) -> list[GameObject]:
        return [obj for layer in self._objects for obj in list(layer)]

    def begin(self) -> None:
        """Called when the level starts; begins every object."""
        for obj in self._all_objects():
            obj.begin()

    def tick(self, dt: float) -> None:
        """Forget last frame's colliders, then tick every object."""
        for colliders in self._colliders:
            colliders.clear()
        for obj in self._all_objects():
            obj.tick(dt)

    def final_tick(self, dt: float) -> None:
        for obj in self._all_objects():
            obj.final_tick(dt)

    def render(self) -> None:
        """Drop dead objects and render the rest, layer by layer."""
        for index, layer in enumerate(self._objects):
            alive = []
            for obj in layer:
                if obj.is_dead:
                    continue
                obj.render()
                alive.append(obj)
            self._objects[index] = alive

    def end(self) -> None:
        """Called when the level is left; removes every object."""
        self.delete_all_objects()

    def add_object(self, obj: GameObject, layer: int) -> None:
        index = self._layer(layer)
        self._objects[index].append(obj)
        obj.layer = layer

    def objects(self, layer: int) -> tuple[GameObject, ...]:
        return tuple(self._objects[self._layer(layer)])

    def register_collider(self, collider: Any, layer: int) -> None:
        self._colliders[self._layer(layer)].append(collider)

    def colliders(self, layer: int) -> tuple[Any, ...]:
        return tuple(self._colliders[self._layer(layer)])

    def find_object_by_name(self, layer: int, name: str) -> GameObject | None:
        return next(
            (obj for obj in self._objects[self._layer(layer)] if obj.name == name),
            None,
        )

    def object_count(self, layer: int) -> int:
        return len(self._objects[self._layer(layer)])

    def delete_layer(self, layer: int) -> None:
        self._objects[self._layer(layer)].clear()

    def delete_all_objects(self) -> None:
        for layer in self._objects:
            layer.clear()


class LevelManager:
    """Owns every level and runs the current one."""

    def __init__(self, levels: Mapping[Hashable, Level], start: Hashable) -> None:
        self._levels = dict(levels)
        if start not in self._levels:
            raise KeyError(f"unknown level {start!r}")
        self._current: Level | None = self._levels[start]
        self._current.begin()

    @property
    def current(self) -> Level | None:
        return self._current

    def change_level(self, key: Hashable) -> None:
        """End the current level and begin the one under ``key``."""
        if key not in self._levels:
            raise KeyError(f"unknown level {key!r}")
        next_level = self._levels[key]
        if next_level is self._current:
            return
        if self._current is not None:
            self._current.end()
        self._current = next_level
        self._current.begin()

    def progress(self, dt: float) -> None:
        if self._current is None:
            return
        self._current.tick(dt)
        self._current.final_tick(dt)

    def render(self) -> None:
        if self._current is not None:
            self._current.render()

    def find_object_by_name(self, layer: int, name: str) -> GameObject | None:
        if self._current is None:
            return None
        return self._current.find_object_by_name(layer, name)