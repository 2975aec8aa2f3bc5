"""Game state value and transition result."""

from __future__ import annotations

from dataclasses import dataclass

from arcade.battleship.core.board import Board
from arcade.battleship.core.events import GameEvent
from arcade.battleship.core.models import Coord, Orientation, Phase, Side


@dataclass(frozen=True, slots=True)
class GameState:
    """Complete state of one naval combat game.

    Instances are never mutated; transitions build replacements with
    `dataclasses.replace`. `hit_history` holds the opponent's hits on the
    player board that do not yet belong to a sunk vessel.
    """

    phase: Phase
    turn: Side
    player_board: Board
    opponent_board: Board
    placed_vessel_ids: frozenset[str] = frozenset()
    streak: int = 0
    hit_history: tuple[Coord, ...] = ()
    selected_vessel_id: str | None = None
    orientation: Orientation = Orientation.HORIZONTAL
    winner: Side | None = None
    message: str = ""

    def board_of(self, side: Side) -> Board:
        """Return the board owned by `side`."""
        return self.player_board if side is Side.PLAYER else self.opponent_board


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of applying one input to a state.

    Rejected inputs return the original state object unchanged.
    """

    state: GameState
    events: tuple[GameEvent, ...] = ()
