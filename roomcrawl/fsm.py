"""A finite state machine component with named states."""

from __future__ import annotations

from typing import Any

from roomcrawl.core import Component


class State:
    """One state of an FSM; override the hooks that matter."""

    def __init__(self) -> None:
        self.fsm: FSM | None = None

    @property
    def owner(self) -> Any:
        """The object owning the FSM this state belongs to."""
        return self.fsm.owner if self.fsm is not None else None

    def enter(self) -> None:
        """Called when the machine switches into this state."""

    def final_tick(self, dt: float) -> None:
        """Called every frame while this state is current."""

    def exit(self) -> None:
        """Called when the machine leaves this state."""


class FSM(Component):
    """Holds named states and runs the current one each frame."""

    def __init__(self) -> None:
        super().__init__("fsm")
        self._states: dict[str, State] = {}
        self._current: State | None = None

    @property
    def current(self) -> State | None:
        return self._current

    def add_state(self, key: str, state: State) -> None:
        if key in self._states:
            raise ValueError(f"state {key!r} already exists")
        state.fsm = self
        self._states[key] = state

    def find_state(self, key: str) -> State | None:
        return self._states.get(key)

    def change_state(self, key: str) -> None:
        """Exit the current state and enter the one named ``key``."""
        next_state = self.find_state(key)
        if next_state is None:
            raise KeyError(f"unknown state {key!r}")
        if self._current is not None:
            self._current.exit()
        self._current = next_state
        self._current.enter()

    def current_state_name(self) -> str | None:
        """Name of the current state, or None if no state is current."""
        for key, state in self._states.items():
            if state is self._current:
                return key
        return None

    def final_tick(self, dt: float) -> None:
        if self._current is not None:
            self._current.final_tick(dt)