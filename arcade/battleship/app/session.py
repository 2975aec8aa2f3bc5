"""Game session: owns state, routes input, schedules the opponent's moves."""

from __future__ import annotations

import logging
import random

from engine.api.ai import DecisionContext
from engine.api.events import EventBus
from engine.api.gameplay import StateStore, create_state_store
from engine.runtime.scheduler import Scheduler
from arcade.battleship.ai.hunt_target import HuntTargetAI
from arcade.battleship.ai.strategy import TargetingStrategy
from arcade.battleship.app.events import (
    OpponentFired,
    OpponentMoveCancelled,
    OpponentMoveScheduled,
    StateChanged,
)
from arcade.battleship.app.services.outcome import OutcomeTracker
from arcade.battleship.core import rules
from arcade.battleship.core.events import GameOver
from arcade.battleship.core.models import Phase, Side
from arcade.battleship.core.state import GameState, Transition

logger = logging.getLogger(__name__)

DEFAULT_OPPONENT_DELAY_SECONDS = 0.7
DEFAULT_ROTATE_KEY = "w"


class BattleshipSession:
    """Single control flow for one player's naval combat session.

    Every input is turned into a pure rules transition, the resulting state
    is stored, and its events are published on the bus followed by a
    `StateChanged`. When the turn passes to the opponent, its move is
    deferred on the scheduler; any pending move is cancelled as soon as the
    game leaves that turn or is restarted, so a stale move never lands on a
    new board.
    """

    def __init__(
        self,
        *,
        rng: random.Random,
        scheduler: Scheduler,
        event_bus: EventBus,
        outcome: OutcomeTracker,
        strategy: TargetingStrategy | None = None,
        opponent_delay_seconds: float = DEFAULT_OPPONENT_DELAY_SECONDS,
        rotate_key: str = DEFAULT_ROTATE_KEY,
        initial_streak: int = 0,
    ) -> None:
        if opponent_delay_seconds < 0.0:
            raise ValueError("opponent_delay_seconds must be >= 0")
        self._rng = rng
        self._scheduler = scheduler
        self._events = event_bus
        self._outcome = outcome
        self._strategy = strategy if strategy is not None else HuntTargetAI(rng)
        self._opponent_delay_seconds = opponent_delay_seconds
        self._rotate_key = rotate_key.strip().lower()
        self._opponent_task: int | None = None
        self._store: StateStore[GameState] = create_state_store(
            rules.new_game(rng, streak=initial_streak)
        )
        logger.info("session_start streak=%d", initial_streak)

    @property
    def state(self) -> GameState:
        return self._store.peek()

    @property
    def revision(self) -> int:
        return self._store.revision()

    @property
    def rotate_key(self) -> str:
        return self._rotate_key

    @property
    def opponent_move_pending(self) -> bool:
        return self._scheduler.is_pending(self._opponent_task)

    def select_vessel(self, vessel_id: str) -> bool:
        """Take a vessel from the dock for placement."""
        return self._apply(rules.select_vessel(self.state, vessel_id))

    def press_key(self, key: str) -> bool:
        """Handle a keypress; the rotate key toggles placement orientation."""
        if key.strip().lower() != self._rotate_key:
            return False
        return self._apply(rules.toggle_orientation(self.state))

    def click_player_cell(self, x: int, y: int) -> bool:
        """Place, or lift back up, a vessel on the player's own board."""
        return self._apply(rules.setup_click(self.state, x, y))

    def click_opponent_cell(self, x: int, y: int) -> bool:
        """Fire at the opponent's board."""
        return self._apply(rules.attack(self.state, Side.PLAYER, x, y))

    def restart(self) -> bool:
        """Discard the current game and start a fresh setup phase."""
        self._cancel_opponent_move()
        return self._apply(rules.restart(self.state, self._rng))

    def advance(self, delta_seconds: float) -> int:
        """Advance the scheduler clock, running any due opponent move."""
        return self._scheduler.advance(delta_seconds)

    def _apply(self, transition: Transition) -> bool:
        current = self.state
        if transition.state is current and not transition.events:
            return False
        next_state = transition.state
        if any(isinstance(event, GameOver) for event in transition.events):
            next_state = self._outcome.record(next_state)
        if next_state is not current:
            snapshot = self._store.set(next_state)
        else:
            snapshot = self._store.snapshot()
        self._sync_opponent_schedule()
        self._events.publish_all(transition.events)
        if next_state is not current:
            self._events.publish(StateChanged(state=snapshot.value, revision=snapshot.revision))
        return next_state is not current

    def _sync_opponent_schedule(self) -> None:
        state = self.state
        if state.phase is Phase.PLAYING and state.turn is Side.OPPONENT:
            if not self.opponent_move_pending:
                self._schedule_opponent_move()
            return
        self._cancel_opponent_move()

    def _schedule_opponent_move(self) -> None:
        task_id = self._scheduler.call_later(
            self._opponent_delay_seconds,
            self._run_opponent_move,
            label="opponent_move",
        )
        self._opponent_task = task_id
        self._events.publish(
            OpponentMoveScheduled(task_id=task_id, delay_seconds=self._opponent_delay_seconds)
        )

    def _cancel_opponent_move(self) -> None:
        task_id = self._opponent_task
        self._opponent_task = None
        if self._scheduler.cancel(task_id):
            logger.info("opponent_move_cancelled task_id=%s", task_id)
            self._events.publish(OpponentMoveCancelled(task_id=task_id))

    def _run_opponent_move(self) -> None:
        self._opponent_task = None
        state = self.state
        if state.phase is not Phase.PLAYING or state.turn is not Side.OPPONENT:
            return
        decision = self._strategy.decide(
            DecisionContext(
                now_seconds=self._scheduler.now_seconds,
                observations={
                    TargetingStrategy.BOARD_KEY: state.player_board,
                    TargetingStrategy.HISTORY_KEY: state.hit_history,
                },
            )
        )
        shot = decision.payload
        if decision.action != TargetingStrategy.ACTION_FIRE or shot is None:
            logger.warning("opponent_move_skipped action=%s", decision.action)
            return
        self._events.publish(OpponentFired(target=shot))
        self._apply(rules.attack(state, Side.OPPONENT, shot.x, shot.y))
