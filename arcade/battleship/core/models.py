"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10
GAME_ID = "Battleship"


class Orientation(StrEnum):
    """Vessel orientation: horizontal extends along +x, vertical along +y."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    def toggled(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class Terrain(StrEnum):
    WATER = "WATER"
    VESSEL = "VESSEL"


class Visibility(StrEnum):
    HIDDEN = "HIDDEN"
    HIT = "HIT"
    MISS = "MISS"


class Side(StrEnum):
    """Turn owner / attacking side."""

    PLAYER = "PLAYER"
    OPPONENT = "OPPONENT"

    @property
    def other(self) -> Side:
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class Phase(StrEnum):
    SETUP = "SETUP"
    PLAYING = "PLAYING"
    GAMEOVER = "GAMEOVER"


@dataclass(frozen=True, slots=True, order=True)
class Coord:
    """Board coordinate; `x` is the column, `y` the row."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Vessel:
    """A fleet member. `color` is for renderers only."""

    id: str
    name: str
    length: int
    color: str


@dataclass(frozen=True, slots=True)
class Cell:
    """Read view of one board cell."""

    terrain: Terrain
    visibility: Visibility
    vessel_id: str | None = None


FLEET: tuple[Vessel, ...] = (
    Vessel("carrier", "Carrier", 5, "#8b5cf6"),
    Vessel("battleship", "Battleship", 4, "#3b82f6"),
    Vessel("cruiser", "Cruiser", 3, "#10b981"),
    Vessel("submarine", "Submarine", 3, "#f59e0b"),
    Vessel("destroyer", "Destroyer", 2, "#ef4444"),
)

FLEET_IDS: frozenset[str] = frozenset(vessel.id for vessel in FLEET)


def vessel_by_id(vessel_id: str) -> Vessel | None:
    """Find fleet vessel for the given id."""
    for vessel in FLEET:
        if vessel.id == vessel_id:
            return vessel
    return None


def cells_for_placement(x: int, y: int, length: int, orientation: Orientation) -> list[Coord]:
    """Compute the cells a vessel would occupy from origin (x, y)."""
    if orientation is Orientation.HORIZONTAL:
        return [Coord(x + i, y) for i in range(length)]
    return [Coord(x, y + i) for i in range(length)]
