"""Hunt/target opponent: random search that escalates to line-following."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from arcade.battleship.ai.strategy import TargetingStrategy
from arcade.battleship.core.board import Board
from arcade.battleship.core.models import Coord

logger = logging.getLogger(__name__)


class HuntTargetAI(TargetingStrategy):
    """Opponent that exploits confirmed damage before searching at random.

    Modes, first applicable wins:

    1. two or more unresolved hits in one row or column: fire just past
       either end of the run;
    2. exactly one unresolved hit: fire at an orthogonal neighbour;
    3. otherwise: fire at a uniformly random hidden cell.

    Only cell visibility is read, never vessel terrain.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def choose_shot(self, board: Board, hit_history: Sequence[Coord]) -> Coord:
        if len(hit_history) >= 2:
            ends = line_end_candidates(board, hit_history)
            if ends:
                return self._pick("line", ends)
        if len(hit_history) == 1:
            neighbors = adjacent_candidates(board, hit_history[0])
            if neighbors:
                return self._pick("adjacent", neighbors)
        return self._random_search(board)

    def _pick(self, mode: str, candidates: list[Coord]) -> Coord:
        choice = candidates[self._rng.randrange(len(candidates))]
        logger.debug("ai_target mode=%s candidates=%d choice=%s", mode, len(candidates), choice)
        return choice

    def _random_search(self, board: Board) -> Coord:
        if not board.hidden_cells():
            raise RuntimeError("no hidden cells left to target")
        while True:
            x = self._rng.randrange(board.size)
            y = self._rng.randrange(board.size)
            if board.is_hidden(x, y):
                logger.debug("ai_target mode=random choice=(%d, %d)", x, y)
                return Coord(x, y)


def line_end_candidates(board: Board, hits: Sequence[Coord]) -> list[Coord]:
    """Return hidden cells one step beyond each end of a collinear run of hits."""
    xs = {hit.x for hit in hits}
    ys = {hit.y for hit in hits}
    if len(xs) == 1:
        ordered = sorted(hits, key=lambda hit: hit.y)
        first, last = ordered[0], ordered[-1]
        ends = [Coord(first.x, first.y - 1), Coord(last.x, last.y + 1)]
    elif len(ys) == 1:
        ordered = sorted(hits, key=lambda hit: hit.x)
        first, last = ordered[0], ordered[-1]
        ends = [Coord(first.x - 1, first.y), Coord(last.x + 1, last.y)]
    else:
        return []
    return [end for end in ends if board.is_hidden(end.x, end.y)]


def adjacent_candidates(board: Board, hit: Coord) -> list[Coord]:
    """Return hidden orthogonal neighbours of a hit."""
    neighbors = (
        Coord(hit.x, hit.y - 1),
        Coord(hit.x, hit.y + 1),
        Coord(hit.x - 1, hit.y),
        Coord(hit.x + 1, hit.y),
    )
    return [cell for cell in neighbors if board.is_hidden(cell.x, cell.y)]
