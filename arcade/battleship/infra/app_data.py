"""Arcade app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root; relative overrides are anchored at the project root."""
    configured = os.getenv("ARCADE_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_project_root() / candidate
    return resolve_project_root() / "appdata"


def resolve_project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def resolve_logs_dir() -> Path:
    """Resolve logs directory, honouring ARCADE_LOG_DIR."""
    configured = os.getenv("ARCADE_LOG_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        return candidate if candidate.is_absolute() else resolve_app_data_root() / candidate
    return resolve_app_data_root() / "logs"


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    root = resolve_app_data_root()
    logs = resolve_logs_dir()
    root.mkdir(parents=True, exist_ok=True)
    logs.mkdir(parents=True, exist_ok=True)
    return {"root": root, "logs": logs}
