"""Gameplay state primitives."""

from engine.gameplay.state_store import RuntimeStateStore

__all__ = ["RuntimeStateStore"]
