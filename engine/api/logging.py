"""Public engine logging API."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: LoggingConfig) -> None:
    """Install root handlers for the given configuration."""
    from engine.runtime.logging import configure_engine_logging

    configure_engine_logging(config)


def shutdown_logging() -> None:
    """Flush and stop the background file listener if one is running."""
    from engine.runtime.logging import stop_queue_listener

    stop_queue_listener()


def get_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)
