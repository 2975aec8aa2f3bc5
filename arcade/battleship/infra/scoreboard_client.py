"""HTTP scoreboard client and token providers."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from http.client import HTTPException, HTTPResponse
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

import orjson

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/submit-score"

Opener = Callable[..., HTTPResponse]


class HttpScoreboardClient:
    """Posts scores to the portfolio backend's `/submit-score` endpoint.

    Submission is fire-and-forget from the game's side: every transport or
    HTTP failure is logged and reported as `False`, never raised.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 5.0,
        opener: Opener = urlopen,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}{SUBMIT_PATH}"
        self._timeout_seconds = timeout_seconds
        self._opener = opener

    @property
    def url(self) -> str:
        return self._url

    def submit_score(self, game_id: str, score: int, token: str) -> bool:
        try:
            request = Request(
                self._url,
                data=orjson.dumps({"game_name": game_id, "score": int(score)}),
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {token}",
                },
                method="POST",
            )
            with self._opener(request, timeout=self._timeout_seconds) as resp:  # noqa: S310
                status = int(getattr(resp, "status", 200))
                resp.read()
        except HTTPError as exc:
            logger.warning(
                "score_submit_failed game=%s score=%d status=%s", game_id, score, exc.code
            )
            return False
        except (URLError, HTTPException, TimeoutError, OSError, ValueError) as exc:
            logger.warning("score_submit_failed game=%s score=%d error=%r", game_id, score, exc)
            return False
        logger.info("score_submitted game=%s score=%d status=%d", game_id, score, status)
        return 200 <= status < 300


class StaticTokenProvider:
    """Token held in memory, e.g. handed over by the host page after login."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token or None

    def token(self) -> str | None:
        return self._token

    def is_authenticated(self) -> bool:
        return self._token is not None


class EnvTokenProvider:
    """Token read from an environment variable on each lookup."""

    def __init__(self, var_name: str = "ARCADE_AUTH_TOKEN") -> None:
        self._var_name = var_name

    def token(self) -> str | None:
        return os.getenv(self._var_name, "").strip() or None

    def is_authenticated(self) -> bool:
        return self.token() is not None
