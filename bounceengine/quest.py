"""Quests made of objectives."""

from __future__ import annotations

from enum import Enum


class ObjectiveState(Enum):
    """State of an objective or of a whole quest."""

    # In the quest log.
    INACTIVE = 0
    INCOMPLETE = 0
    # Successfully completed.
    COMPLETE = 1
    # Failed.
    FAILED = 2
    # Not discovered by the player yet.
    UNKNOWN = 3
    # Actively followed by the player.
    ACTIVE = 4


class Objective:
    """A single objective of a quest."""

    def __init__(
        self,
        parent_quest: Quest,
        name: str,
        description: str = "",
        state: ObjectiveState = ObjectiveState.UNKNOWN,
    ) -> None:
        self.id = parent_quest.request_new_id()
        self.name = name
        self.description = description
        self._state = state

    @property
    def state(self) -> ObjectiveState:
        return self._state

    def can_change(self) -> bool:
        """True unless the objective is failed or complete."""
        return self._state not in (ObjectiveState.FAILED, ObjectiveState.COMPLETE)

    def highlight(self) -> None:
        """Make this the followed objective."""
        if self.can_change():
            self._state = ObjectiveState.ACTIVE

    def ignore(self) -> None:
        if self.can_change():
            self._state = ObjectiveState.INACTIVE

    def forget(self) -> None:
        if self.can_change():
            self._state = ObjectiveState.UNKNOWN

    def discover(self) -> None:
        if self._state is ObjectiveState.UNKNOWN:
            self._state = ObjectiveState.ACTIVE

    def fail(self) -> None:
        if self._state is not ObjectiveState.COMPLETE:
            self._state = ObjectiveState.FAILED

    def complete(self) -> None:
        if self._state is not ObjectiveState.FAILED:
            self._state = ObjectiveState.COMPLETE


class Quest:
    """A group of objectives."""

    def __init__(self, id: int, name: str, description: str = "") -> None:
        self.id = id
        self.name = name
        self.description = description
        self.objectives: list[Objective] = []
        self._last_id = 0

    def state(self) -> ObjectiveState:
        """The overall state derived from the objectives."""
        states = [objective.state for objective in self.objectives]
        if all(state is ObjectiveState.COMPLETE for state in states):
            return ObjectiveState.COMPLETE
        if all(state is ObjectiveState.FAILED for state in states):
            return ObjectiveState.FAILED
        active = ObjectiveState.ACTIVE in states
        complete = ObjectiveState.INACTIVE not in states
        if active and not complete:
            return ObjectiveState.ACTIVE
        return ObjectiveState.INCOMPLETE

    def complete(self) -> None:
        """Complete every objective that has not failed."""
        for objective in self.objectives:
            objective.complete()

    def request_new_id(self) -> int:
        """Return the next free objective ID."""
        new_id = self._last_id
        self._last_id += 1
        return new_id