from __future__ import annotations

from http.client import BadStatusLine
from urllib.error import HTTPError, URLError

import orjson

from arcade.battleship.infra.scoreboard_client import (
    EnvTokenProvider,
    HttpScoreboardClient,
    StaticTokenProvider,
)


class _FakeResponse:
    def __init__(self, status: int) -> None:
        self.status = status

    def __enter__(self) -> _FakeResponse:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def read(self) -> bytes:
        return b"{}"


class _RecordingOpener:
    def __init__(self, status: int = 200, error: Exception | None = None) -> None:
        self.status = status
        self.error = error
        self.requests: list[tuple[object, float]] = []

    def __call__(self, request, timeout: float):
        self.requests.append((request, timeout))
        if self.error is not None:
            raise self.error
        return _FakeResponse(self.status)


def test_submit_score_posts_json_with_bearer_token() -> None:
    opener = _RecordingOpener()
    client = HttpScoreboardClient("http://scores.test/", timeout_seconds=1.5, opener=opener)

    assert client.url == "http://scores.test/submit-score"
    assert client.submit_score("Battleship", 3, "abc")

    request, timeout = opener.requests[0]
    assert timeout == 1.5
    assert request.get_method() == "POST"
    assert request.full_url == "http://scores.test/submit-score"
    assert request.get_header("Authorization") == "Bearer abc"
    assert request.get_header("Content-type") == "application/json"
    assert orjson.loads(request.data) == {"game_name": "Battleship", "score": 3}


def test_submit_score_non_2xx_status_is_failure() -> None:
    client = HttpScoreboardClient("http://scores.test", opener=_RecordingOpener(status=302))
    assert not client.submit_score("Battleship", 1, "abc")


def test_submit_score_http_error_is_logged_not_raised(caplog) -> None:
    error = HTTPError("http://scores.test/submit-score", 401, "Unauthorized", hdrs=None, fp=None)
    client = HttpScoreboardClient("http://scores.test", opener=_RecordingOpener(error=error))
    assert not client.submit_score("Battleship", 1, "expired")
    assert "score_submit_failed" in caplog.text
    assert "status=401" in caplog.text


def test_submit_score_transport_errors_are_failures() -> None:
    for error in (URLError("refused"), TimeoutError("slow"), OSError("reset")):
        client = HttpScoreboardClient("http://scores.test", opener=_RecordingOpener(error=error))
        assert not client.submit_score("Battleship", 1, "abc")


def test_static_token_provider() -> None:
    assert StaticTokenProvider("tok").token() == "tok"
    assert StaticTokenProvider("tok").is_authenticated()
    assert not StaticTokenProvider("").is_authenticated()
    assert StaticTokenProvider().token() is None


def test_env_token_provider_reads_on_each_lookup(monkeypatch) -> None:
    provider = EnvTokenProvider("ARCADE_TEST_TOKEN")
    monkeypatch.delenv("ARCADE_TEST_TOKEN", raising=False)
    assert not provider.is_authenticated()
    monkeypatch.setenv("ARCADE_TEST_TOKEN", "  fresh  ")
    assert provider.token() == "fresh"
    assert provider.is_authenticated()


def test_submit_score_malformed_status_line_is_failure(caplog) -> None:
    error = BadStatusLine("garbage")
    client = HttpScoreboardClient("http://scores.test", opener=_RecordingOpener(error=error))
    assert not client.submit_score("Battleship", 2, "abc")
    assert "score_submit_failed" in caplog.text


def test_submit_score_schemeless_base_url_is_failure() -> None:
    opener = _RecordingOpener()
    client = HttpScoreboardClient("scores.test", opener=opener)
    assert not client.submit_score("Battleship", 2, "abc")
    assert opener.requests == []
