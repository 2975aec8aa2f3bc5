"""Session-level events published for UI subscribers."""

from __future__ import annotations

from dataclasses import dataclass

from arcade.battleship.core.models import Coord
from arcade.battleship.core.state import GameState


@dataclass(frozen=True, slots=True)
class StateChanged:
    """Published after every accepted input with the new state."""

    state: GameState
    revision: int


@dataclass(frozen=True, slots=True)
class OpponentMoveScheduled:
    task_id: int
    delay_seconds: float


@dataclass(frozen=True, slots=True)
class OpponentMoveCancelled:
    task_id: int


@dataclass(frozen=True, slots=True)
class OpponentFired:
    target: Coord
