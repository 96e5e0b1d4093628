"""Target selection and turning for a homing missile."""

from __future__ import annotations

import math
from typing import Any, Iterable

from roomcrawl.core import Vec2

ALIGN_TOLERANCE_DEGREES = 2.0
MIN_VELOCITY_SCALE = 0.3


def rotate(vec: Vec2, angle: float) -> Vec2:
    """Rotate ``vec`` by ``angle`` radians (clockwise on a y-down screen)."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Vec2(vec.x * cos_a - vec.y * sin_a, vec.x * sin_a + vec.y * cos_a)


def is_clockwise(direction: Vec2, target_direction: Vec2) -> bool:
    """True when turning by a positive angle brings ``direction`` towards the target."""
    return direction.x * target_direction.y - direction.y * target_direction.x > 0.0


def find_target(pos: Vec2, candidates: Iterable[Any], detect_range: float) -> Any:
    """The living candidate closest to ``pos`` and strictly within range, or None."""
    best = None
    best_distance = detect_range
    for candidate in candidates:
        if getattr(candidate, "is_dead", False):
            continue
        distance = (pos - candidate.pos).length()
        if distance < best_distance:
            best_distance = distance
            best = candidate
    return best


def steer(velocity: Vec2, pos: Vec2, target_pos: Vec2, dt: float) -> tuple[Vec2, float]:
    """Turn ``velocity`` towards the target for one frame.

    Returns the new velocity (same speed) and the speed scale to apply, which
    drops from 1.0 when heading straight at the target to 0.3 at 90 degrees or more.
    """
    heading = velocity.normalized()
    to_target = (target_pos - pos).normalized()

    dot = max(-1.0, min(1.0, heading.dot(to_target)))
    degree = abs(math.degrees(math.acos(dot)))

    ratio = min(degree / 90.0, 1.0)
    scale = MIN_VELOCITY_SCALE + (1.0 - ratio) * (1.0 - MIN_VELOCITY_SCALE)

    if 0.0 <= degree <= ALIGN_TOLERANCE_DEGREES:
        return velocity, scale

    turn_dir = 1.0 if is_clockwise(heading, to_target) else -1.0
    turned = rotate(heading, turn_dir * math.pi * dt) * velocity.length()
    return turned, scale