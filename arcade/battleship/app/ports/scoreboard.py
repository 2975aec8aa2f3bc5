"""Collaborator ports consumed by the game: score submission and auth lookup."""

from __future__ import annotations

from typing import Protocol


class ScoreSubmitter(Protocol):
    """Remote scoreboard. Best effort: implementations must not raise."""

    def submit_score(self, game_id: str, score: int, token: str) -> bool:
        """Submit one score; return whether the scoreboard accepted it."""


class TokenProvider(Protocol):
    """Externally held credential for the signed-in user."""

    def token(self) -> str | None:
        """Return the bearer token, or None for anonymous play."""

    def is_authenticated(self) -> bool:
        """Return whether a user is signed in."""
