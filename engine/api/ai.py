"""Public AI primitive API contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class DecisionContext:
    """What an agent may look at for one think tick.

    `observations` is a read-only view the caller builds per tick; agents must
    not mutate what they find there.
    """

    now_seconds: float
    observations: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Decision[TPayload]:
    """Chosen action plus the single value it acts on (e.g. a target cell)."""

    action: str
    payload: TPayload | None = None


class Agent[TPayload](Protocol):
    """AI agent contract."""

    def decide(self, context: DecisionContext) -> Decision[TPayload]:
        """Return the next action and its payload."""
