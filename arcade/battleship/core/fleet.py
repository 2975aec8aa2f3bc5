"""Random fleet generation."""

from __future__ import annotations

import logging
import random

from arcade.battleship.core.board import Board, empty_board, set_vessel
from arcade.battleship.core.models import (
    BOARD_SIZE,
    FLEET,
    Orientation,
    Vessel,
    cells_for_placement,
)
from arcade.battleship.core.placement import is_legal_placement

logger = logging.getLogger(__name__)

_ORIENTATIONS = (Orientation.HORIZONTAL, Orientation.VERTICAL)


def placement_order(fleet: tuple[Vessel, ...] = FLEET) -> list[Vessel]:
    """Return vessels longest first; ties keep fleet order."""
    return sorted(fleet, key=lambda vessel: -vessel.length)


def random_fleet_board(rng: random.Random, size: int = BOARD_SIZE) -> Board:
    """Generate a board with the whole fleet legally seated."""
    return seat_random_fleet(empty_board(size), rng)


def seat_random_fleet(
    board: Board, rng: random.Random, fleet: tuple[Vessel, ...] = FLEET
) -> Board:
    """Seat every vessel of `fleet` not already on `board` at a random legal spot.

    Samples origin and orientation uniformly and resamples until legal. The
    fleet is small relative to the board, so a legal spot always exists.
    """
    seated = board.vessel_ids()
    for vessel in placement_order(fleet):
        if vessel.id in seated:
            continue
        attempts = 0
        while True:
            attempts += 1
            x = rng.randrange(board.size)
            y = rng.randrange(board.size)
            orientation = rng.choice(_ORIENTATIONS)
            if is_legal_placement(board, x, y, vessel.length, orientation):
                break
        board = set_vessel(board, cells_for_placement(x, y, vessel.length, orientation), vessel.id)
        logger.debug(
            "fleet_seat vessel=%s x=%d y=%d orientation=%s attempts=%d",
            vessel.id,
            x,
            y,
            orientation.value,
            attempts,
        )
    return board
