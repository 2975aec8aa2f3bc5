"""Drive a session through the public input surface without a UI."""

from __future__ import annotations

import logging
import random

from arcade.battleship.ai.hunt_target import HuntTargetAI
from arcade.battleship.app.session import BattleshipSession
from arcade.battleship.core.board import Board, empty_board
from arcade.battleship.core.fleet import placement_order, seat_random_fleet
from arcade.battleship.core.models import Coord, Orientation, Phase, Side, Visibility

logger = logging.getLogger(__name__)


def deploy_random_fleet(session: BattleshipSession, rng: random.Random) -> None:
    """Seat the player's fleet by selecting, rotating and clicking like a user would."""
    layout = seat_random_fleet(empty_board(session.state.player_board.size), rng)
    for vessel in placement_order():
        cells = layout.vessel_cells(vessel.id)
        orientation = (
            Orientation.VERTICAL
            if len(cells) > 1 and cells[0].x == cells[1].x
            else Orientation.HORIZONTAL
        )
        session.select_vessel(vessel.id)
        if session.state.orientation is not orientation:
            session.press_key(session.rotate_key)
        session.click_player_cell(cells[0].x, cells[0].y)
    if session.state.phase is not Phase.PLAYING:
        raise RuntimeError("autoplay failed to deploy the full fleet")


def unresolved_hits(board: Board) -> tuple[Coord, ...]:
    """Return hits on `board` that belong to vessels still afloat."""
    hits: list[Coord] = []
    for y in range(board.size):
        for x in range(board.size):
            cell = board.cell(x, y)
            if cell.visibility is not Visibility.HIT or cell.vessel_id is None:
                continue
            if not board.is_vessel_sunk(cell.vessel_id):
                hits.append(Coord(x, y))
    return tuple(hits)


def play_headless_match(
    session: BattleshipSession,
    rng: random.Random,
    *,
    tick_seconds: float = 0.1,
    max_steps: int = 10_000,
) -> Side:
    """Play one full game with a hunt/target AI standing in for the player."""
    if session.state.phase is Phase.GAMEOVER:
        session.restart()
    if session.state.phase is Phase.SETUP:
        deploy_random_fleet(session, rng)

    player_ai = HuntTargetAI(rng)
    for _ in range(max_steps):
        state = session.state
        if state.phase is Phase.GAMEOVER:
            if state.winner is None:
                raise RuntimeError("finished match has no winner")
            logger.info("autoplay_finished winner=%s streak=%d", state.winner.value, state.streak)
            return state.winner
        if state.turn is Side.PLAYER:
            shot = player_ai.choose_shot(state.opponent_board, unresolved_hits(state.opponent_board))
            session.click_opponent_cell(shot.x, shot.y)
        else:
            session.advance(tick_seconds)
    raise RuntimeError(f"match did not finish within {max_steps} steps")
