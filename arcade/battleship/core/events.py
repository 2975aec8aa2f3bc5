"""Domain events emitted by game transitions."""

from __future__ import annotations

from dataclasses import dataclass

from arcade.battleship.core.models import Coord, Orientation, Phase, Side, Vessel


@dataclass(frozen=True, slots=True)
class GameEvent:
    """Base class for everything a transition reports to observers."""


@dataclass(frozen=True, slots=True)
class VesselPlaced(GameEvent):
    vessel: Vessel
    origin: Coord
    orientation: Orientation


@dataclass(frozen=True, slots=True)
class VesselRetracted(GameEvent):
    vessel: Vessel


@dataclass(frozen=True, slots=True)
class PlacementRejected(GameEvent):
    """A manual placement failed bounds, overlap or no-touching checks."""

    vessel: Vessel
    origin: Coord
    orientation: Orientation


@dataclass(frozen=True, slots=True)
class ShotResolved(GameEvent):
    attacker: Side
    target: Coord
    hit: bool


@dataclass(frozen=True, slots=True)
class VesselSunk(GameEvent):
    """`attacker` sank `vessel` belonging to the other side."""

    attacker: Side
    vessel: Vessel


@dataclass(frozen=True, slots=True)
class PhaseChanged(GameEvent):
    previous: Phase
    current: Phase


@dataclass(frozen=True, slots=True)
class GameOver(GameEvent):
    winner: Side


@dataclass(frozen=True, slots=True)
class GameRestarted(GameEvent):
    streak: int
