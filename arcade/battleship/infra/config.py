"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "http://localhost:8080"

_DEFAULT_ENV_PATHS = (
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
    ".env",
    ".env.local",
)


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    Blank lines, comments and lines without `=` are skipped. Matching single
    or double quotes around a value are stripped.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left to right; later files win."""
    for path in tuple(paths) if paths is not None else _DEFAULT_ENV_PATHS:
        load_env_file(path, override_existing=override_existing)


@dataclass(frozen=True, slots=True)
class BattleshipSettings:
    """Runtime settings for one arcade session."""

    api_url: str = DEFAULT_API_URL
    score_timeout_seconds: float = 5.0
    opponent_delay_seconds: float = 0.7
    rotate_key: str = "w"
    seed: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BattleshipSettings:
        """Build settings from `ARCADE_*` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        api_url = env.get("ARCADE_API_URL", "").strip() or DEFAULT_API_URL
        rotate_key = env.get("ARCADE_ROTATE_KEY", "").strip().lower() or "w"
        if len(rotate_key) != 1:
            raise ValueError(f"ARCADE_ROTATE_KEY must be a single character, got {rotate_key!r}")
        delay_ms = _env_float(env, "ARCADE_OPPONENT_DELAY_MS", 700.0)
        if delay_ms < 0:
            raise ValueError("ARCADE_OPPONENT_DELAY_MS must be >= 0")
        timeout = _env_float(env, "ARCADE_SCORE_TIMEOUT_SECONDS", 5.0)
        if timeout <= 0:
            raise ValueError("ARCADE_SCORE_TIMEOUT_SECONDS must be > 0")
        return cls(
            api_url=api_url.rstrip("/"),
            score_timeout_seconds=timeout,
            opponent_delay_seconds=delay_ms / 1000.0,
            rotate_key=rotate_key,
            seed=_env_optional_int(env, "ARCADE_SEED"),
        )


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_optional_int(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
