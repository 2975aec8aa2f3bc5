"""Turn resolution and setup transitions.

Every function takes a GameState and returns a Transition; none of them
mutate their inputs. Inputs that are not legal in the current phase or turn
return the original state with no events.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from arcade.battleship.core.board import Board, empty_board, mark_shot, remove_vessel, set_vessel
from arcade.battleship.core.errors import InvalidPlacementError
from arcade.battleship.core.events import (
    GameEvent,
    GameOver,
    GameRestarted,
    PhaseChanged,
    PlacementRejected,
    ShotResolved,
    VesselPlaced,
    VesselRetracted,
    VesselSunk,
)
from arcade.battleship.core.fleet import random_fleet_board
from arcade.battleship.core.models import (
    BOARD_SIZE,
    Coord,
    Phase,
    Side,
    Terrain,
    Vessel,
    cells_for_placement,
    vessel_by_id,
)
from arcade.battleship.core.phases import FLEET_DESTROYED, FLEET_READY, PHASE_FLOW, RESTART
from arcade.battleship.core.placement import is_legal_placement
from arcade.battleship.core.state import GameState, Transition

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Place your ships! Select a vessel, then click your board."
RESTART_MESSAGE = "New war started! Place your ships."
READY_MESSAGE = "Ready for battle! Fire at the enemy."


def new_game(rng: random.Random, *, streak: int = 0, size: int = BOARD_SIZE) -> GameState:
    """Create a fresh game in setup with a generated opponent fleet."""
    if streak < 0:
        raise ValueError("streak must be >= 0")
    return GameState(
        phase=Phase.SETUP,
        turn=Side.PLAYER,
        player_board=empty_board(size),
        opponent_board=random_fleet_board(rng, size),
        streak=streak,
        message=WELCOME_MESSAGE,
    )


def restart(state: GameState, rng: random.Random) -> Transition:
    """Reinitialize the game from any phase, keeping only the streak."""
    target = PHASE_FLOW.resolve(state.phase, RESTART)
    if target is None:
        raise RuntimeError(f"restart is not reachable from {state.phase}")
    fresh = replace(
        new_game(rng, streak=state.streak, size=state.player_board.size),
        message=RESTART_MESSAGE,
    )
    events: list[GameEvent] = [GameRestarted(streak=state.streak)]
    if state.phase is not target:
        events.append(PhaseChanged(previous=state.phase, current=target))
    logger.info("game_restart previous_phase=%s streak=%d", state.phase.value, state.streak)
    return Transition(state=fresh, events=tuple(events))


def select_vessel(state: GameState, vessel_id: str) -> Transition:
    """Pick an unplaced vessel from the dock."""
    vessel = _require_vessel(vessel_id)
    if state.phase is not Phase.SETUP or vessel.id in state.placed_vessel_ids:
        return Transition(state=state)
    updated = replace(
        state,
        selected_vessel_id=vessel.id,
        message=f"{vessel.name} selected ({state.orientation.value.lower()}).",
    )
    return Transition(state=updated)


def toggle_orientation(state: GameState) -> Transition:
    """Flip placement orientation during setup."""
    if state.phase is not Phase.SETUP:
        return Transition(state=state)
    orientation = state.orientation.toggled()
    return Transition(
        state=replace(state, orientation=orientation, message=f"Orientation: {orientation.value.lower()}.")
    )


def setup_click(state: GameState, x: int, y: int) -> Transition:
    """Handle a click on the player board during setup.

    Clicking a seated vessel lifts it back into hand. Otherwise the selected
    vessel is seated at (x, y) when legal.
    """
    if state.phase is not Phase.SETUP:
        return Transition(state=state)
    cell = state.player_board.cell(x, y)
    if cell.terrain is Terrain.VESSEL and cell.vessel_id is not None:
        return _retract(state, _require_vessel(cell.vessel_id))
    if state.selected_vessel_id is None:
        return Transition(state=state)
    return _place(state, _require_vessel(state.selected_vessel_id), x, y)


def attack(state: GameState, side: Side, x: int, y: int) -> Transition:
    """Fire at the board defended by the other side.

    A hit keeps the turn; a miss passes it. Sinking the last hidden vessel
    cell ends the game with `side` as the winner.
    """
    if state.phase is not Phase.PLAYING or state.turn is not side:
        logger.debug("attack_ignored side=%s phase=%s turn=%s", side, state.phase, state.turn)
        return Transition(state=state)
    defender = side.other
    board = state.board_of(defender)
    cell = board.cell(x, y)
    if not board.is_hidden(x, y):
        logger.debug("attack_ignored_repeat side=%s x=%d y=%d", side.value, x, y)
        return Transition(state=state)

    target = Coord(x, y)
    hit = cell.terrain is Terrain.VESSEL
    board = mark_shot(board, x, y, hit)
    events: list[GameEvent] = [ShotResolved(attacker=side, target=target, hit=hit)]
    logger.debug("shot_resolved side=%s x=%d y=%d hit=%s", side.value, x, y, hit)
    history = state.hit_history
    if side is Side.OPPONENT and hit:
        history = (*history, target)

    if not hit:
        updated = _with_board(state, defender, board)
        updated = replace(
            updated,
            turn=defender,
            message="Miss. Computer turn." if side is Side.PLAYER else "Computer missed. Your turn.",
        )
        return Transition(state=updated, events=tuple(events))

    vessel = _require_vessel(cell.vessel_id or "")
    if board.is_vessel_sunk(vessel.id):
        events.append(VesselSunk(attacker=side, vessel=vessel))
        if side is Side.OPPONENT:
            history = tuple(coord for coord in history if board.vessel_id_at(coord.x, coord.y) != vessel.id)
        message = (
            f"SUNK! You destroyed their {vessel.name}!"
            if side is Side.PLAYER
            else f"Computer SUNK your {vessel.name.upper()}!"
        )
        logger.info("vessel_sunk attacker=%s vessel=%s", side.value, vessel.id)
    else:
        message = "HIT! Fire again." if side is Side.PLAYER else f"Computer hit your {vessel.name}."

    updated = replace(_with_board(state, defender, board), hit_history=history, message=message)
    if board.all_vessels_sunk():
        phase = PHASE_FLOW.resolve(state.phase, FLEET_DESTROYED)
        if phase is None:
            raise RuntimeError(f"{FLEET_DESTROYED} is not reachable from {state.phase}")
        updated = replace(
            updated,
            phase=phase,
            winner=side,
            message="VICTORY!" if side is Side.PLAYER else "DEFEAT.",
        )
        events.append(PhaseChanged(previous=state.phase, current=phase))
        events.append(GameOver(winner=side))
        logger.info("game_over winner=%s", side.value)
    return Transition(state=updated, events=tuple(events))


def _place(state: GameState, vessel: Vessel, x: int, y: int) -> Transition:
    origin = Coord(x, y)
    if not is_legal_placement(state.player_board, x, y, vessel.length, state.orientation):
        logger.debug("placement_rejected vessel=%s x=%d y=%d", vessel.id, x, y)
        return Transition(
            state=state,
            events=(PlacementRejected(vessel=vessel, origin=origin, orientation=state.orientation),),
        )
    board = set_vessel(
        state.player_board,
        cells_for_placement(x, y, vessel.length, state.orientation),
        vessel.id,
    )
    logger.debug(
        "vessel_placed vessel=%s x=%d y=%d orientation=%s", vessel.id, x, y, state.orientation.value
    )
    placed = state.placed_vessel_ids | {vessel.id}
    events: list[GameEvent] = [
        VesselPlaced(vessel=vessel, origin=origin, orientation=state.orientation)
    ]
    updated = replace(
        state,
        player_board=board,
        placed_vessel_ids=placed,
        selected_vessel_id=None,
        message=f"{vessel.name} placed.",
    )
    phase = PHASE_FLOW.resolve(state.phase, FLEET_READY, payload=placed)
    if phase is not None:
        updated = replace(updated, phase=phase, turn=Side.PLAYER, message=READY_MESSAGE)
        events.append(PhaseChanged(previous=state.phase, current=phase))
        logger.info("fleet_ready placed=%d", len(placed))
    return Transition(state=updated, events=tuple(events))


def _retract(state: GameState, vessel: Vessel) -> Transition:
    updated = replace(
        state,
        player_board=remove_vessel(state.player_board, vessel.id),
        placed_vessel_ids=state.placed_vessel_ids - {vessel.id},
        selected_vessel_id=vessel.id,
        message=f"Picked up {vessel.name}. Place it again.",
    )
    return Transition(state=updated, events=(VesselRetracted(vessel=vessel),))


def _with_board(state: GameState, side: Side, board: Board) -> GameState:
    if side is Side.PLAYER:
        return replace(state, player_board=board)
    return replace(state, opponent_board=board)


def _require_vessel(vessel_id: str) -> Vessel:
    vessel = vessel_by_id(vessel_id)
    if vessel is None:
        raise InvalidPlacementError(f"unknown vessel id: {vessel_id}")
    return vessel
