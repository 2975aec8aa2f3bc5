"""Opponent targeting strategy contract backed by engine AI primitives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from engine.api.ai import Agent, Decision, DecisionContext
from arcade.battleship.core.board import Board
from arcade.battleship.core.models import Coord


class TargetingStrategy(Agent[Coord], ABC):
    """Chooses the opponent's next shot from a read-only view of the player board."""

    ACTION_FIRE = "fire"
    ACTION_WAIT = "wait"
    BOARD_KEY = "board"
    HISTORY_KEY = "hit_history"

    def decide(self, context: DecisionContext) -> Decision[Coord]:
        """Fire at the chosen cell, or wait when there is nothing left to shoot."""
        board = context.observations.get(self.BOARD_KEY)
        history = context.observations.get(self.HISTORY_KEY, ())
        if not isinstance(board, Board) or not board.hidden_cells():
            return Decision(self.ACTION_WAIT)
        return Decision(self.ACTION_FIRE, payload=self.choose_shot(board, tuple(history)))

    @abstractmethod
    def choose_shot(self, board: Board, hit_history: Sequence[Coord]) -> Coord:
        """Return the next cell to fire at. Must be in bounds and hidden."""
