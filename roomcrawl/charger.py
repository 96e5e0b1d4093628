"""The charger monster: it wanders, turns at walls and charges along straight lines."""

from __future__ import annotations

import enum
from typing import Any, Callable

from roomcrawl.assets import Flipbook
from roomcrawl.core import Base, Vec2
from roomcrawl.flipbook_player import FlipbookPlayer
from roomcrawl.fsm import FSM, State

DIRECTIONS = "LRUD"
STEER_FORCE = 2000.0
DETECT_RANGE = 350.0
IDLE_MAX_SPEED = 400.0
ATTACK_MAX_SPEED = 1000.0
INITIAL_MAX_SPEED = 250.0
MOVE_FPS = 15.0
ATTACK_FPS = 1.0
DEATH_DELAY = 0.5


class ChargerAnim(enum.IntEnum):
    MOVE_UP = 0
    MOVE_DOWN = 1
    MOVE_RIGHT = 2
    MOVE_LEFT = 3
    ATTACK_UP = 4
    ATTACK_DOWN = 5
    ATTACK_RIGHT = 6
    ATTACK_LEFT = 7


_TURNS = {
    "L": {"L": "D", "R": "U"},
    "R": {"L": "U", "R": "D"},
    "U": {"L": "L", "R": "R"},
    "D": {"L": "R", "R": "L"},
}

_FORCES = {
    "L": Vec2(-1.0, 0.0),
    "R": Vec2(1.0, 0.0),
    "U": Vec2(0.0, -1.0),
    "D": Vec2(0.0, 1.0),
}

_MOVE_ANIMS = {
    "U": ChargerAnim.MOVE_UP,
    "D": ChargerAnim.MOVE_DOWN,
    "R": ChargerAnim.MOVE_RIGHT,
    "L": ChargerAnim.MOVE_LEFT,
}

_ATTACK_ANIMS = {
    "U": ChargerAnim.ATTACK_UP,
    "D": ChargerAnim.ATTACK_DOWN,
    "R": ChargerAnim.ATTACK_RIGHT,
    "L": ChargerAnim.ATTACK_LEFT,
}


def _check_dir(move_dir: str) -> str:
    if move_dir not in _FORCES:
        raise ValueError(f"invalid direction {move_dir!r}")
    return move_dir


def turn(move_dir: str, turn_dir: str) -> str:
    """Direction after turning left ('L') or right ('R') from ``move_dir``."""
    _check_dir(move_dir)
    if turn_dir not in ("L", "R"):
        raise ValueError(f"invalid turn direction {turn_dir!r}")
    return _TURNS[move_dir][turn_dir]


def direction_force(move_dir: str) -> Vec2:
    """The steering force applied while moving in ``move_dir``."""
    return _FORCES[_check_dir(move_dir)].normalized() * STEER_FORCE


def detect_charge(
    target_pos: Vec2, pos: Vec2, scale: Vec2, detect_range: float = DETECT_RANGE
) -> str | None:
    """Direction to charge in when the target is in range and lined up, else None."""
    if (target_pos - pos).length() > detect_range:
        return None
    half_x, half_y = scale.x / 2, scale.y / 2
    if pos.x - half_x < target_pos.x < pos.x + half_x:
        return "D" if target_pos.y > pos.y else "U"
    if pos.y - half_y < target_pos.y < pos.y + half_y:
        return "R" if target_pos.x > pos.x else "L"
    return None


def move_animation(move_dir: str) -> tuple[ChargerAnim, bool]:
    """Walking animation slot for a direction and whether it is mirrored."""
    return _MOVE_ANIMS[_check_dir(move_dir)], move_dir == "L"


def attack_animation(move_dir: str) -> tuple[ChargerAnim, bool]:
    """Charging animation slot for a direction and whether it is mirrored."""
    return _ATTACK_ANIMS[_check_dir(move_dir)], move_dir == "L"


class Charger(Base):
    """A monster that walks in straight lines and charges a lined-up target."""

    MAX_HP = 3

    def __init__(
        self,
        pos: Vec2 = Vec2(0.0, 0.0),
        scale: Vec2 = Vec2(100.0, 100.0),
        turn_dir: str = "L",
    ) -> None:
        super().__init__("CCharger")
        if turn_dir not in ("L", "R"):
            raise ValueError(f"invalid turn direction {turn_dir!r}")
        self.pos = pos
        self.scale = scale
        self.layer = 0
        self.is_dead = False
        self.active = True

        self.move_dir = "D"
        self.prev_dir = "D"
        self.turn_dir = turn_dir
        self.is_attacking = False
        self.is_turn = False
        self.is_touch_rock = False

        self.max_hp = self.MAX_HP
        self.cur_hp = self.MAX_HP
        self.speed = 100.0
        self.max_speed = INITIAL_MAX_SPEED
        self.force = Vec2(0.0, 0.0)

        self.collider_scale = Vec2(80.0, 80.0)
        self.target_finder: Callable[[], Any] | None = None

        self.flipbook_player = FlipbookPlayer()
        self.flipbook_player.owner = self
        self.flipbook_player.name = "Charger_Flipbook"
        self.flipbook_player.render_size = Vec2(100.0, 100.0)
        self.flipbook_player.render_offset = Vec2(0.0, -25.0)
        for anim in ChargerAnim:
            self.flipbook_player.add_flipbook(Flipbook(), int(anim))

        self.fsm = FSM()
        self.fsm.owner = self
        self.fsm.add_state("Idle", ChargerIdleState(self, self._find_target))
        self.fsm.add_state("Attack", ChargerAttackState(self))
        self.fsm.add_state("Death", ChargerDeathState(self))

    def _find_target(self) -> Any:
        return self.target_finder() if self.target_finder is not None else None

    def begin(self) -> None:
        self.fsm.change_state("Idle")

    def steer(self) -> Vec2 | None:
        """Apply turns and return this frame's steering force; None while inactive."""
        if not self.active:
            return None
        if self.cur_hp == 0:
            self.force = Vec2(0.0, 0.0)
            return self.force

        if self.is_turn:
            self.move_dir = turn(self.move_dir, self.turn_dir)
            if not self.is_attacking:
                self.is_turn = False

        self.force = direction_force(self.move_dir)
        self.prev_dir = self.move_dir
        return self.force

    def tick(self, dt: float) -> None:
        self.steer()

    def final_tick(self, dt: float) -> None:
        self.flipbook_player.final_tick(dt)
        self.fsm.final_tick(dt)

    def render(self) -> None:
        """Drawing is left to the host; nothing to compute here."""

    def hit_obstacle(self, is_rock: bool) -> None:
        """React to bumping into a wall or rock: turn, and note a rock hit mid-charge."""
        if self.is_attacking and is_rock:
            self.is_touch_rock = True
        self.is_turn = True

    def leave_obstacle(self, is_rock: bool) -> None:
        if is_rock:
            self.is_touch_rock = False

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` hit points (never below zero) and flash."""
        if amount < 0:
            raise ValueError("damage must not be negative")
        self.cur_hp = max(0, self.cur_hp - amount)
        self.flipbook_player.set_hitted(True)


def _play(player: FlipbookPlayer, anim: ChargerAnim, inversion: bool, fps: float, repeat: bool) -> None:
    if player.playing_index() != int(anim):
        player.play(int(anim), fps, repeat, inversion)


class ChargerIdleState(State):
    """Wanders and watches for a lined-up target."""

    def __init__(self, charger: Charger, find_target: Callable[[], Any] | None = None) -> None:
        super().__init__()
        self.charger = charger
        self._find_target = find_target
        self.target: Any = None

    def enter(self) -> None:
        self.charger.max_speed = IDLE_MAX_SPEED
        if self.target is None and self._find_target is not None:
            self.target = self._find_target()

    def final_tick(self, dt: float) -> None:
        charger = self.charger
        if not charger.active:
            return

        if self.target is not None:
            direction = detect_charge(self.target.pos, charger.pos, charger.scale)
            if direction is not None:
                charger.is_attacking = True
                charger.move_dir = direction

        anim, inversion = move_animation(charger.move_dir)
        _play(charger.flipbook_player, anim, inversion, MOVE_FPS, True)

        if charger.cur_hp <= 0:
            self.fsm.change_state("Death")
        elif charger.is_attacking and not charger.is_touch_rock:
            self.fsm.change_state("Attack")


class ChargerAttackState(State):
    """Charges until the charger bumps into something."""

    def __init__(self, charger: Charger) -> None:
        super().__init__()
        self.charger = charger

    def enter(self) -> None:
        self.charger.max_speed = ATTACK_MAX_SPEED

    def final_tick(self, dt: float) -> None:
        charger = self.charger
        if charger.cur_hp <= 0:
            self.fsm.change_state("Death")
            return
        if not charger.is_attacking:
            self.fsm.change_state("Idle")
            return

        if charger.is_turn:
            charger.is_attacking = False
            charger.is_turn = False

        anim, inversion = attack_animation(charger.move_dir)
        _play(charger.flipbook_player, anim, inversion, ATTACK_FPS, False)


class ChargerDeathState(State):
    """Removes the charger shortly after it dies."""

    def __init__(self, charger: Charger) -> None:
        super().__init__()
        self.charger = charger
        self.elapsed = 0.0

    def enter(self) -> None:
        self.elapsed = 0.0

    def final_tick(self, dt: float) -> None:
        if self.elapsed >= DEATH_DELAY:
            self.charger.is_dead = True
        self.elapsed += dt