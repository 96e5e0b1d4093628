"""A component that plays flipbook animations frame by frame."""

from __future__ import annotations

from roomcrawl.assets import Flipbook
from roomcrawl.core import Component, Vec2

HIT_EFFECT_DURATION = 0.3


def _saturate(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class FlipbookPlayer(Component):
    """Holds indexed flipbooks and advances the one playing at a fixed frame rate."""

    def __init__(self) -> None:
        super().__init__("flipbook_player")
        self._flipbooks: list[Flipbook | None] = []
        self._current: Flipbook | None = None
        self._sprite_index = 0
        self._fps = 0.0
        self._time = 0.0
        self._repeat = False
        self._finished = False
        self.inversion = False
        self.render_size = Vec2(0.0, 0.0)
        self.render_offset = Vec2(0.0, 0.0)
        self._hit_time = 0.0
        self._hit_duration = HIT_EFFECT_DURATION
        self._hitted = False

    @property
    def current_flipbook(self) -> Flipbook | None:
        return self._current

    @property
    def sprite_index(self) -> int:
        return self._sprite_index

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def hitted(self) -> bool:
        return self._hitted

    @property
    def flipbooks(self) -> list[Flipbook | None]:
        return list(self._flipbooks)

    def add_flipbook(self, flipbook: Flipbook, index: int | None = None) -> None:
        """Append a flipbook, or place it at ``index``, growing the slots as needed."""
        if index is None:
            self._flipbooks.append(flipbook)
            return
        if index < 0:
            raise IndexError(f"flipbook index {index} out of range")
        if len(self._flipbooks) <= index:
            self._flipbooks.extend([None] * (index + 1 - len(self._flipbooks)))
        self._flipbooks[index] = flipbook

    def play(self, index: int, fps: float, repeat: bool, inversion: bool = False) -> None:
        """Start the flipbook in slot ``index`` from its first sprite."""
        if not 0 <= index < len(self._flipbooks):
            raise IndexError(f"flipbook index {index} out of range")
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._current = self._flipbooks[index]
        self._sprite_index = 0
        self._fps = fps
        self._repeat = repeat
        self._finished = False
        self._time = 0.0
        self.inversion = inversion

    def reset(self) -> None:
        """Rewind to the first sprite and clear the finished flag."""
        self._finished = False
        self._sprite_index = 0

    def playing_index(self) -> int:
        """Slot of the flipbook playing, or -1 when none is."""
        if self._current is None:
            return -1
        for slot, flipbook in enumerate(self._flipbooks):
            if flipbook is self._current:
                return slot
        return -1

    def current_sprite(self) -> object | None:
        """The sprite to draw now, or None when nothing is playing."""
        if self._current is None:
            return None
        return self._current.get_sprite(self._sprite_index)

    def set_hitted(self, hitted: bool) -> None:
        """Start (or stop) the hit flash, restarting its timer."""
        self._hit_time = 0.0
        self._hitted = hitted

    def hit_alpha(self, dt: float) -> int:
        """Blend alpha for this frame's draw, then advance the hit flash by ``dt``."""
        age = _saturate(self._hit_time / self._hit_duration)
        alpha = 255
        if self._hitted:
            age *= 2.0
            if age <= 1.0:
                alpha = int(255.0 * age)
            else:
                alpha = int(255.0 * (1.0 - (age - 1.0)))

        self._hit_time += dt
        if self._hit_duration <= self._hit_time:
            self._hitted = False
        return alpha

    def final_tick(self, dt: float) -> None:
        if self._current is None:
            return

        if self._finished:
            if self._repeat:
                self.reset()
            else:
                return

        self._time += dt
        frame_time = 1.0 / self._fps
        if frame_time <= self._time:
            self._time -= frame_time
            self._sprite_index += 1
            if self._current.sprite_count() <= self._sprite_index:
                self._finished = True
                self._sprite_index -= 1