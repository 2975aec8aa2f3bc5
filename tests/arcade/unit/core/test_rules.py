from __future__ import annotations

import random

import pytest

from arcade.battleship.core import rules
from arcade.battleship.core.board import empty_board
from arcade.battleship.core.errors import InvalidPlacementError, OutOfBoundsError
from arcade.battleship.core.events import (
    GameOver,
    GameRestarted,
    PhaseChanged,
    PlacementRejected,
    ShotResolved,
    VesselPlaced,
    VesselRetracted,
    VesselSunk,
)
from arcade.battleship.core.models import FLEET_IDS, Coord, Orientation, Phase, Side, Visibility
from tests.arcade.conftest import ROW_LAYOUT, make_board, make_playing_state


def _place(state, vessel_id: str, x: int, y: int, orientation=Orientation.HORIZONTAL):
    state = rules.select_vessel(state, vessel_id).state
    if state.orientation is not orientation:
        state = rules.toggle_orientation(state).state
    return rules.setup_click(state, x, y)


def test_new_game_starts_in_setup_with_generated_opponent(seeded_rng) -> None:
    state = rules.new_game(seeded_rng, streak=3)
    assert state.phase is Phase.SETUP
    assert state.turn is Side.PLAYER
    assert state.player_board == empty_board()
    assert state.opponent_board.vessel_ids() == FLEET_IDS
    assert state.streak == 3
    assert state.hit_history == ()
    assert state.placed_vessel_ids == frozenset()


def test_new_game_rejects_negative_streak(seeded_rng) -> None:
    with pytest.raises(ValueError):
        rules.new_game(seeded_rng, streak=-1)


def test_setup_completes_only_when_all_five_vessels_placed(seeded_rng) -> None:
    state = rules.new_game(seeded_rng)
    ids = list(ROW_LAYOUT)
    for vessel_id in ids[:-1]:
        x, y, orientation = ROW_LAYOUT[vessel_id]
        state = _place(state, vessel_id, x, y, orientation).state
        assert state.phase is Phase.SETUP

    x, y, orientation = ROW_LAYOUT[ids[-1]]
    transition = _place(state, ids[-1], x, y, orientation)
    assert transition.state.phase is Phase.PLAYING
    assert transition.state.turn is Side.PLAYER
    assert transition.state.placed_vessel_ids == FLEET_IDS
    assert PhaseChanged(previous=Phase.SETUP, current=Phase.PLAYING) in transition.events


def test_retract_and_replace_does_not_double_count(seeded_rng) -> None:
    state = rules.new_game(seeded_rng)
    for vessel_id in ("carrier", "battleship", "cruiser", "submarine"):
        x, y, orientation = ROW_LAYOUT[vessel_id]
        state = _place(state, vessel_id, x, y, orientation).state

    retracted = rules.setup_click(state, 2, 0)
    assert isinstance(retracted.events[0], VesselRetracted)
    state = retracted.state
    assert state.selected_vessel_id == "carrier"
    assert "carrier" not in state.placed_vessel_ids
    assert "carrier" not in state.player_board.vessel_ids()

    state = rules.setup_click(state, 5, 0).state
    assert state.placed_vessel_ids == FLEET_IDS - {"destroyer"}
    assert state.phase is Phase.SETUP

    state = _place(state, "destroyer", 0, 8).state
    assert state.phase is Phase.PLAYING


def test_illegal_placement_leaves_state_untouched(seeded_rng) -> None:
    state = _place(rules.new_game(seeded_rng), "carrier", 0, 0).state
    state = rules.select_vessel(state, "destroyer").state

    touching = rules.setup_click(state, 0, 1)
    assert touching.state is state
    assert touching.events == (
        PlacementRejected(vessel=touching.events[0].vessel, origin=Coord(0, 1), orientation=Orientation.HORIZONTAL),
    )
    out_of_bounds = rules.setup_click(state, 9, 5)
    assert out_of_bounds.state is state
    assert isinstance(out_of_bounds.events[0], PlacementRejected)


def test_click_without_selection_is_ignored(seeded_rng) -> None:
    state = rules.new_game(seeded_rng)
    transition = rules.setup_click(state, 3, 3)
    assert transition.state is state
    assert transition.events == ()


def test_place_emits_vessel_placed_and_clears_selection(seeded_rng) -> None:
    transition = _place(rules.new_game(seeded_rng), "submarine", 4, 4, Orientation.VERTICAL)
    assert isinstance(transition.events[0], VesselPlaced)
    assert transition.state.selected_vessel_id is None
    assert transition.state.player_board.vessel_cells("submarine") == [Coord(4, 4), Coord(4, 5), Coord(4, 6)]


def test_select_vessel_ignores_placed_vessels_and_rejects_unknown(seeded_rng) -> None:
    state = _place(rules.new_game(seeded_rng), "carrier", 0, 0).state
    assert rules.select_vessel(state, "carrier").state is state
    with pytest.raises(InvalidPlacementError):
        rules.select_vessel(state, "rowboat")


def test_toggle_orientation_only_during_setup(seeded_rng) -> None:
    state = rules.new_game(seeded_rng)
    assert rules.toggle_orientation(state).state.orientation is Orientation.VERTICAL
    playing = make_playing_state()
    assert rules.toggle_orientation(playing).state is playing


def test_attack_ignored_outside_playing_phase_or_turn(seeded_rng) -> None:
    setup = rules.new_game(seeded_rng)
    assert rules.attack(setup, Side.PLAYER, 0, 0).state is setup

    playing = make_playing_state(turn=Side.PLAYER)
    assert rules.attack(playing, Side.OPPONENT, 0, 0).state is playing


def test_attack_out_of_bounds_is_a_contract_violation() -> None:
    with pytest.raises(OutOfBoundsError):
        rules.attack(make_playing_state(), Side.PLAYER, 10, 0)


def test_hit_keeps_turn_and_miss_passes_it() -> None:
    state = make_playing_state(turn=Side.PLAYER)

    hit = rules.attack(state, Side.PLAYER, 0, 0)
    assert hit.events[0] == ShotResolved(attacker=Side.PLAYER, target=Coord(0, 0), hit=True)
    assert hit.state.turn is Side.PLAYER
    assert hit.state.opponent_board.cell(0, 0).visibility is Visibility.HIT

    miss = rules.attack(hit.state, Side.PLAYER, 9, 9)
    assert miss.events[0] == ShotResolved(attacker=Side.PLAYER, target=Coord(9, 9), hit=False)
    assert miss.state.turn is Side.OPPONENT
    assert miss.state.opponent_board.cell(9, 9).visibility is Visibility.MISS

    opponent_miss = rules.attack(miss.state, Side.OPPONENT, 9, 9)
    assert opponent_miss.state.turn is Side.PLAYER
    assert opponent_miss.state.player_board.cell(9, 9).visibility is Visibility.MISS


def test_repeat_attack_is_a_noop() -> None:
    state = rules.attack(make_playing_state(), Side.PLAYER, 0, 0).state
    repeat = rules.attack(state, Side.PLAYER, 0, 0)
    assert repeat.state is state
    assert repeat.events == ()
    assert state.opponent_board.cell(0, 0).visibility is Visibility.HIT


def test_opponent_hits_are_tracked_until_their_vessel_sinks() -> None:
    state = make_playing_state(turn=Side.OPPONENT)
    state = rules.attack(state, Side.OPPONENT, 0, 4).state
    state = rules.attack(state, Side.OPPONENT, 0, 8).state
    assert state.hit_history == (Coord(0, 4), Coord(0, 8))

    sunk = rules.attack(state, Side.OPPONENT, 1, 8)
    assert VesselSunk(attacker=Side.OPPONENT, vessel=sunk.events[1].vessel) in sunk.events
    assert sunk.events[1].vessel.id == "destroyer"
    assert sunk.state.hit_history == (Coord(0, 4),)
    assert sunk.state.turn is Side.OPPONENT


def test_player_hits_never_enter_hit_history() -> None:
    state = rules.attack(make_playing_state(), Side.PLAYER, 0, 0).state
    assert state.hit_history == ()


def test_sinking_last_vessel_ends_game() -> None:
    opponent = make_board({"destroyer": ROW_LAYOUT["destroyer"]})
    state = make_playing_state(opponent_board=opponent)
    state = rules.attack(state, Side.PLAYER, 0, 8).state
    final = rules.attack(state, Side.PLAYER, 1, 8)

    assert final.state.phase is Phase.GAMEOVER
    assert final.state.winner is Side.PLAYER
    assert GameOver(winner=Side.PLAYER) in final.events
    assert PhaseChanged(previous=Phase.PLAYING, current=Phase.GAMEOVER) in final.events
    assert rules.attack(final.state, Side.PLAYER, 5, 5).state is final.state


def test_restart_yields_identical_fresh_state_from_any_phase(seeded_rng) -> None:
    setup = rules.new_game(seeded_rng, streak=2)
    playing = rules.attack(make_playing_state(streak=2), Side.PLAYER, 0, 0).state

    from_setup = rules.restart(setup, random.Random(42))
    from_playing = rules.restart(playing, random.Random(42))

    assert from_setup.state == from_playing.state
    fresh = from_playing.state
    assert fresh.phase is Phase.SETUP
    assert fresh.streak == 2
    assert fresh.hit_history == ()
    assert fresh.player_board == empty_board()
    assert fresh.opponent_board.vessel_ids() == FLEET_IDS
    assert GameRestarted(streak=2) in from_playing.events
    assert PhaseChanged(previous=Phase.PLAYING, current=Phase.SETUP) in from_playing.events
