from __future__ import annotations

import random
from dataclasses import dataclass, field

import pytest

from engine.api.events import create_event_bus
from engine.runtime.scheduler import Scheduler
from arcade.battleship.app.services.outcome import OutcomeTracker
from arcade.battleship.app.session import BattleshipSession
from arcade.battleship.core.board import Board, empty_board, set_vessel
from arcade.battleship.core.models import FLEET, Orientation, Phase, Side, cells_for_placement
from arcade.battleship.core.state import GameState

# vessel id -> (x, y, orientation); rows 0/2/4/6/8 keep every vessel apart
ROW_LAYOUT: dict[str, tuple[int, int, Orientation]] = {
    "carrier": (0, 0, Orientation.HORIZONTAL),
    "battleship": (0, 2, Orientation.HORIZONTAL),
    "cruiser": (0, 4, Orientation.HORIZONTAL),
    "submarine": (0, 6, Orientation.HORIZONTAL),
    "destroyer": (0, 8, Orientation.HORIZONTAL),
}


def make_board(layout: dict[str, tuple[int, int, Orientation]] = ROW_LAYOUT) -> Board:
    board = empty_board()
    lengths = {vessel.id: vessel.length for vessel in FLEET}
    for vessel_id, (x, y, orientation) in layout.items():
        board = set_vessel(board, cells_for_placement(x, y, lengths[vessel_id], orientation), vessel_id)
    return board


def make_playing_state(
    *,
    player_board: Board | None = None,
    opponent_board: Board | None = None,
    turn: Side = Side.PLAYER,
    streak: int = 0,
) -> GameState:
    return GameState(
        phase=Phase.PLAYING,
        turn=turn,
        player_board=player_board if player_board is not None else make_board(),
        opponent_board=opponent_board if opponent_board is not None else make_board(),
        placed_vessel_ids=frozenset(vessel.id for vessel in FLEET),
        streak=streak,
    )


@dataclass
class FakeScoreboard:
    accept: bool = True
    error: Exception | None = None
    calls: list[tuple[str, int, str]] = field(default_factory=list)

    def submit_score(self, game_id: str, score: int, token: str) -> bool:
        self.calls.append((game_id, score, token))
        if self.error is not None:
            raise self.error
        return self.accept


@dataclass
class FakeTokens:
    value: str | None = "token-123"

    def token(self) -> str | None:
        return self.value

    def is_authenticated(self) -> bool:
        return self.value is not None


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def scoreboard() -> FakeScoreboard:
    return FakeScoreboard()


@pytest.fixture
def tokens() -> FakeTokens:
    return FakeTokens()


@pytest.fixture
def event_log() -> list[object]:
    return []


@pytest.fixture
def session_factory(scoreboard: FakeScoreboard, tokens: FakeTokens, event_log: list[object]):
    def _make(seed: int = 1337, delay: float = 0.7) -> BattleshipSession:
        bus = create_event_bus()
        bus.subscribe(object, event_log.append)
        return BattleshipSession(
            rng=random.Random(seed),
            scheduler=Scheduler(),
            event_bus=bus,
            outcome=OutcomeTracker(scoreboard, tokens),
            opponent_delay_seconds=delay,
        )

    return _make


def deploy_row_fleet(session: BattleshipSession) -> None:
    """Place the whole fleet through the session's input surface."""
    for vessel_id, (x, y, orientation) in ROW_LAYOUT.items():
        session.select_vessel(vessel_id)
        if session.state.orientation is not orientation:
            session.press_key(session.rotate_key)
        session.click_player_cell(x, y)
