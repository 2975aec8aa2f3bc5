"""Phase transition table for a game."""

from __future__ import annotations

from engine.api.flow import FlowContext, FlowTransition, create_flow_program
from arcade.battleship.core.models import FLEET_IDS, Phase

FLEET_READY = "fleet_ready"
FLEET_DESTROYED = "fleet_destroyed"
RESTART = "restart"


def _whole_fleet_placed(context: FlowContext[Phase]) -> bool:
    placed = context.payload
    return isinstance(placed, frozenset) and FLEET_IDS <= placed


def default_phase_transitions() -> tuple[FlowTransition[Phase], ...]:
    """Return the setup -> playing -> gameover table plus restart from anywhere."""
    return (
        FlowTransition(
            trigger=FLEET_READY,
            source=Phase.SETUP,
            target=Phase.PLAYING,
            guard=_whole_fleet_placed,
        ),
        FlowTransition(trigger=FLEET_DESTROYED, source=Phase.PLAYING, target=Phase.GAMEOVER),
        FlowTransition(trigger=RESTART, source=None, target=Phase.SETUP),
    )


PHASE_FLOW = create_flow_program(default_phase_transitions())
