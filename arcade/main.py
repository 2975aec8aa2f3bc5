"""Console entry point: play headless Battleship matches against the AI."""

from __future__ import annotations

import argparse
import logging
import random

from engine.api.events import create_event_bus
from engine.api.logging import shutdown_logging
from engine.runtime.scheduler import Scheduler
from arcade.battleship.app.services.autoplay import play_headless_match
from arcade.battleship.app.services.outcome import OutcomeTracker
from arcade.battleship.app.session import BattleshipSession
from arcade.battleship.core.events import VesselSunk
from arcade.battleship.infra.app_data import ensure_app_data_dirs
from arcade.battleship.infra.config import BattleshipSettings, load_default_env_files
from arcade.battleship.infra.logging import setup_logging
from arcade.battleship.infra.scoreboard_client import EnvTokenProvider, HttpScoreboardClient

logger = logging.getLogger(__name__)


def build_session(settings: BattleshipSettings, rng: random.Random) -> BattleshipSession:
    """Wire a session with the HTTP scoreboard and env-held token."""
    event_bus = create_event_bus()
    event_bus.subscribe(
        VesselSunk,
        lambda event: print(f"  {event.attacker.value.lower()} sank {event.vessel.name}"),
    )
    outcome = OutcomeTracker(
        HttpScoreboardClient(settings.api_url, timeout_seconds=settings.score_timeout_seconds),
        EnvTokenProvider(),
    )
    return BattleshipSession(
        rng=rng,
        scheduler=Scheduler(),
        event_bus=event_bus,
        outcome=outcome,
        opponent_delay_seconds=settings.opponent_delay_seconds,
        rotate_key=settings.rotate_key,
    )


def main(argv: list[str] | None = None) -> int:
    """Run headless matches and print the resulting streak."""
    parser = argparse.ArgumentParser(description="Play Battleship matches against the computer.")
    parser.add_argument("--games", type=int, default=1, help="number of matches to play")
    parser.add_argument("--seed", type=int, default=None, help="override ARCADE_SEED")
    parser.add_argument("--no-log-file", action="store_true", help="log to console only")
    args = parser.parse_args(argv)

    load_default_env_files(override_existing=False)
    paths = ensure_app_data_dirs()
    setup_logging(to_file=not args.no_log_file)
    settings = BattleshipSettings.from_env()
    seed = args.seed if args.seed is not None else settings.seed
    logger.info("app_data_paths root=%s logs=%s seed=%s", paths["root"], paths["logs"], seed)

    rng = random.Random(seed)
    session = build_session(settings, rng)
    try:
        for game in range(1, max(1, args.games) + 1):
            winner = play_headless_match(session, rng)
            state = session.state
            print(f"game {game}: {winner.value.lower()} wins, streak {state.streak}")
            print(state.player_board.render())
            print()
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
