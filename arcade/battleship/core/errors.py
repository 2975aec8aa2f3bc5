"""Domain exception hierarchy."""

from __future__ import annotations


class BattleshipError(Exception):
    """Base class for naval combat domain errors."""


class OutOfBoundsError(BattleshipError, IndexError):
    """Coordinate lookup outside the board. Indicates a caller bug."""

    def __init__(self, x: int, y: int, size: int) -> None:
        super().__init__(f"cell ({x}, {y}) is outside the {size}x{size} board")
        self.x = x
        self.y = y


class AlreadyShotError(BattleshipError):
    """A cell whose visibility is already resolved was shot again."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"cell ({x}, {y}) was already shot")
        self.x = x
        self.y = y


class InvalidShotError(BattleshipError, ValueError):
    """A hit was recorded on a water cell."""


class InvalidPlacementError(BattleshipError, ValueError):
    """A vessel write would overlap another vessel or names an unknown vessel."""
