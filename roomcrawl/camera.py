"""The camera with shake and fade effects, and the timed debug shape list."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any

from roomcrawl.core import Vec2
from roomcrawl.keys import Key, KeyManager, KeyState

_PAN_SPEED = 500.0


def _saturate(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class PostProcess(enum.Enum):
    FADE_IN = 0
    FADE_OUT = 1
    HEART = 2


@dataclass
class CamEffect:
    effect: PostProcess
    duration: float
    time: float = 0.0


class Camera:
    """Maps world positions to screen positions and runs screen effects."""

    def __init__(self, resolution: Vec2) -> None:
        self.resolution = resolution
        self.look_at = resolution / 2.0
        self._offset = Vec2(0.0, 0.0)
        self._diff = Vec2(0.0, 0.0)
        self.target: Any = None

        self._duration = 0.0
        self._amplitude = 0.0
        self._frequency = 0.0
        self._time = 0.0
        self._dir = 1.0
        self._oscillating = False

        self._effects: deque[CamEffect] = deque()

    @property
    def offset(self) -> Vec2:
        return self._offset

    @property
    def view_center(self) -> Vec2:
        """The point the camera is actually looking at, shake included."""
        return self.look_at + self._offset

    @property
    def oscillating(self) -> bool:
        return self._oscillating

    @property
    def effects(self) -> list[CamEffect]:
        return list(self._effects)

    def set_target(self, target: Any) -> None:
        """Follow an object with a ``pos`` attribute, or stop following with None."""
        self.target = target

    def tick(self, dt: float, keys: KeyManager | None = None) -> None:
        self._diff = self.view_center - self.resolution / 2.0

        if keys is not None:
            step = dt * _PAN_SPEED
            dx = dy = 0.0
            if keys.state(Key.U) is KeyState.PRESSED:
                dy -= step
            if keys.state(Key.J) is KeyState.PRESSED:
                dy += step
            if keys.state(Key.H) is KeyState.PRESSED:
                dx -= step
            if keys.state(Key.K) is KeyState.PRESSED:
                dx += step
            self.look_at = self.look_at + Vec2(dx, dy)

        if self.target is not None:
            self.look_at = self.target.pos

        self._oscillate(dt)

    def start_oscillation(self, duration: float, amplitude: float, frequency: float) -> None:
        """Shake vertically for ``duration`` seconds."""
        self._duration = duration
        self._amplitude = amplitude
        self._frequency = frequency
        self._time = 0.0
        self._oscillating = True
        self._dir = 1.0

    def _oscillate(self, dt: float) -> None:
        if not self._oscillating:
            return
        speed = self._amplitude * 4.0 * self._frequency
        y = self._offset.y + speed * self._dir * dt
        if self._amplitude < abs(y):
            y = self._amplitude * self._dir
            self._dir = -self._dir
        self._offset = Vec2(self._offset.x, y)

        self._time += dt
        if self._duration <= self._time:
            self._oscillating = False
            self._offset = Vec2(0.0, 0.0)

    def post_process_effect(self, kind: PostProcess, duration: float) -> None:
        """Queue a screen effect; effects run one after another."""
        self._effects.append(CamEffect(kind, duration))

    def effect_alpha(self, dt: float) -> tuple[PostProcess, int] | None:
        """Blend alpha of the running effect for this frame, then advance it by ``dt``."""
        if not self._effects:
            return None
        effect = self._effects[0]
        age = _saturate(effect.time / effect.duration) if effect.duration > 0 else 1.0

        if effect.effect is PostProcess.FADE_IN:
            alpha = int(255.0 * (1.0 - age))
        elif effect.effect is PostProcess.FADE_OUT:
            alpha = int(255.0 * age)
        else:
            age *= 2.0
            if age <= 1.0:
                alpha = int(150.0 * age)
            else:
                alpha = int(150.0 * (1.0 - (age - 1.0)))

        effect.time += dt
        if effect.duration <= effect.time:
            self._effects.popleft()
        return effect.effect, alpha

    def render_pos(self, real_pos: Vec2) -> Vec2:
        return real_pos - self._diff

    def real_pos(self, render_pos: Vec2) -> Vec2:
        return render_pos + self._diff


class DebugShape(enum.Enum):
    RECT = 0
    CIRCLE = 1
    LINE = 2


@dataclass
class DebugInfo:
    shape: DebugShape
    position0: Vec2
    scale: Vec2 = Vec2(0.0, 0.0)
    position1: Vec2 = Vec2(0.0, 0.0)
    color: str = "green"
    duration: float = 0.0
    time: float = 0.0


class DebugRenderer:
    """Keeps debug shapes alive for their duration while display is switched on."""

    def __init__(self) -> None:
        self._infos: list[DebugInfo] = []
        self.show = False

    @property
    def infos(self) -> list[DebugInfo]:
        return list(self._infos)

    def add(self, info: DebugInfo) -> None:
        """Queue a shape; ignored while display is off."""
        if not self.show:
            return
        self._infos.append(info)

    def tick(self, keys: KeyManager) -> None:
        if keys.state(Key.C) is KeyState.TAP:
            self.show = not self.show

    def render(self, dt: float) -> list[DebugInfo]:
        """Return the shapes to draw this frame, then age them and drop expired ones."""
        drawn = list(self._infos) if self.show else []
        for info in self._infos:
            info.time += dt
        self._infos = [info for info in self._infos if info.time < info.duration]
        return drawn