"""Application service-layer helpers."""

from arcade.battleship.app.services.outcome import OutcomeTracker

__all__ = ["OutcomeTracker"]
