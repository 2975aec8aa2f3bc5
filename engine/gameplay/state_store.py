"""Gameplay state-store implementation."""

from __future__ import annotations


from engine.api.gameplay import StateSnapshot


class RuntimeStateStore[TState]:
    """Versioned holder for an immutable state value.

    Values are never copied: callers replace the whole value instead of
    mutating it, so a snapshot stays valid after later writes.
    """

    def __init__(self, initial_state: TState) -> None:
        self._value = initial_state
        self._revision = 0

    def snapshot(self) -> StateSnapshot[TState]:
        return StateSnapshot(value=self._value, revision=self._revision)

    def peek(self) -> TState:
        return self._value

    def set(self, value: TState) -> StateSnapshot[TState]:
        self._value = value
        self._revision += 1
        return self.snapshot()

    def revision(self) -> int:
        return self._revision
