"""Public gameplay state-store API contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar

TState = TypeVar("TState")


@dataclass(frozen=True, slots=True)
class StateSnapshot[TState]:
    """Versioned state snapshot from state-store."""

    value: TState
    revision: int


class StateStore(Protocol[TState]):
    """Typed store for immutable gameplay state values."""

    def snapshot(self) -> StateSnapshot[TState]:
        """Return current state snapshot."""

    def peek(self) -> TState:
        """Return current state value."""

    def set(self, value: TState) -> StateSnapshot[TState]:
        """Replace state value and increment revision."""

    def revision(self) -> int:
        """Return number of applied writes."""


def create_state_store[TState](initial_state: TState) -> StateStore[TState]:
    """Create default state-store implementation."""
    from engine.gameplay.state_store import RuntimeStateStore

    return RuntimeStateStore(initial_state)
