"""App-level logging policy over engine logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

from engine.api.logging import LoggingConfig, configure_logging
from arcade.battleship.infra.app_data import resolve_logs_dir

__all__ = ["build_logging_config", "setup_logging"]


def build_logging_config(*, to_file: bool = True) -> LoggingConfig:
    """Resolve logging configuration from environment."""
    level_name = os.getenv("ARCADE_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    console_format = os.getenv("LOG_FORMAT", "json").strip().lower()
    return LoggingConfig(
        level_name=level_name or "INFO",
        console_format=console_format,
        file_path=_resolve_run_log_file_path() if to_file else None,
        file_format="json",
    )


def setup_logging(*, to_file: bool = True) -> LoggingConfig:
    """Configure application logging via engine logging API."""
    config = build_logging_config(to_file=to_file)
    configure_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)
    return config


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"battleship_run_{stamp}.jsonl")
