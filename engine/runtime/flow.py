"""Transition table executor for state flows."""

from __future__ import annotations

import logging

from engine.api.flow import FlowContext, FlowTransition

logger = logging.getLogger(__name__)


class RuntimeFlowProgram[TState]:
    """Resolve next state from a fixed transition table.

    First matching transition wins. Guards see the source, target and caller
    payload and may veto a transition.
    """

    def __init__(self, transitions: tuple[FlowTransition[TState], ...]) -> None:
        self._transitions = transitions

    def resolve(
        self, current_state: TState, trigger: str, *, payload: object | None = None
    ) -> TState | None:
        for transition in self._matching(current_state, trigger):
            context = FlowContext(
                trigger=trigger,
                source=current_state,
                target=transition.target,
                payload=payload,
            )
            if transition.guard is not None and not transition.guard(context):
                logger.debug("flow_guard_rejected trigger=%s source=%s", trigger, current_state)
                continue
            return transition.target
        return None

    def _matching(self, current_state: TState, trigger: str) -> list[FlowTransition[TState]]:
        return [
            transition
            for transition in self._transitions
            if transition.trigger == trigger
            and (transition.source is None or transition.source == current_state)
        ]
