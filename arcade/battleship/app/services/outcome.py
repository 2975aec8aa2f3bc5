"""Win streak bookkeeping and post-game score reporting."""

from __future__ import annotations

import logging
from dataclasses import replace

from arcade.battleship.app.ports.scoreboard import ScoreSubmitter, TokenProvider
from arcade.battleship.core.models import GAME_ID, Phase, Side
from arcade.battleship.core.state import GameState

logger = logging.getLogger(__name__)


class OutcomeTracker:
    """Applies a finished game's result to the session streak.

    A player win increments the streak and reports it when a token is
    available; a loss resets the streak and reports nothing. The local streak
    stays authoritative whatever the scoreboard answers, even when the port
    raises.
    """

    def __init__(
        self,
        scoreboard: ScoreSubmitter,
        tokens: TokenProvider,
        *,
        game_id: str = GAME_ID,
    ) -> None:
        self._scoreboard = scoreboard
        self._tokens = tokens
        self._game_id = game_id

    def record(self, state: GameState) -> GameState:
        """Return `state` with its streak and status updated for the winner."""
        if state.phase is not Phase.GAMEOVER or state.winner is None:
            raise ValueError("outcome can only be recorded for a finished game")
        if state.winner is Side.PLAYER:
            streak = state.streak + 1
            reported = self._report(streak)
            suffix = " Streak uploaded." if reported else ""
            logger.info("streak_increment streak=%d reported=%s", streak, reported)
            return replace(state, streak=streak, message=f"VICTORY! Streak: {streak}.{suffix}")
        logger.info("streak_reset previous=%d", state.streak)
        return replace(state, streak=0, message="DEFEAT. Streak reset to 0.")

    def _report(self, streak: int) -> bool:
        if not self._tokens.is_authenticated():
            logger.debug("score_submit_skipped reason=anonymous")
            return False
        token = self._tokens.token()
        if not token:
            logger.debug("score_submit_skipped reason=missing_token")
            return False
        try:
            return self._scoreboard.submit_score(self._game_id, streak, token)
        except Exception:
            logger.exception("score_submit_error game=%s score=%d", self._game_id, streak)
            return False
