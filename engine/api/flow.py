"""Public flow/state-machine API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class FlowContext[TState]:
    """Transition execution context."""

    trigger: str
    source: TState
    target: TState
    payload: object | None = None


type TransitionGuard[TState] = Callable[[FlowContext[TState]], bool]


@dataclass(frozen=True, slots=True)
class FlowTransition[TState]:
    """Public transition definition. A `None` source matches any state."""

    trigger: str
    source: TState | None
    target: TState
    guard: TransitionGuard[TState] | None = None


class FlowProgram[TState](Protocol):
    """Reusable transition table for stateless state-resolution queries."""

    def resolve(
        self, current_state: TState, trigger: str, *, payload: object | None = None
    ) -> TState | None:
        """Resolve next state for a trigger from a given state."""


def create_flow_program[TState](
    transitions: tuple[FlowTransition[TState], ...],
) -> FlowProgram[TState]:
    """Create the default transition program implementation."""
    from engine.runtime.flow import RuntimeFlowProgram

    return RuntimeFlowProgram(transitions)
