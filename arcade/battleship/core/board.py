"""Board state representation and value-returning mutation helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from arcade.battleship.core.errors import (
    AlreadyShotError,
    InvalidPlacementError,
    InvalidShotError,
    OutOfBoundsError,
)
from arcade.battleship.core.models import (
    BOARD_SIZE,
    FLEET,
    Cell,
    Coord,
    Terrain,
    Visibility,
)

# shots grid encoding
_HIDDEN = 0
_MISS = 1
_HIT = 2

_VISIBILITY_BY_CODE = {_HIDDEN: Visibility.HIDDEN, _MISS: Visibility.MISS, _HIT: Visibility.HIT}
_VESSEL_INDEX = {vessel.id: idx for idx, vessel in enumerate(FLEET, start=1)}


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass(frozen=True, slots=True, eq=False)
class Board:
    """Numpy-backed immutable board.

    `vessels[y, x]` holds the 1-based fleet index of the vessel on a cell (0 is
    water); `shots[y, x]` holds the visibility code. Both arrays are
    read-only; every change produces a new Board.
    """

    vessels: np.ndarray
    shots: np.ndarray

    @property
    def size(self) -> int:
        return int(self.vessels.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)
        index = int(self.vessels[y, x])
        visibility = _VISIBILITY_BY_CODE[int(self.shots[y, x])]
        if index == 0:
            return Cell(terrain=Terrain.WATER, visibility=visibility)
        return Cell(terrain=Terrain.VESSEL, visibility=visibility, vessel_id=FLEET[index - 1].id)

    def is_hidden(self, x: int, y: int) -> bool:
        """Return whether the cell is in bounds and not yet shot."""
        return self.in_bounds(x, y) and int(self.shots[y, x]) == _HIDDEN

    def has_vessel(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and int(self.vessels[y, x]) != 0

    def vessel_id_at(self, x: int, y: int) -> str | None:
        return self.cell(x, y).vessel_id

    def vessel_ids(self) -> frozenset[str]:
        """Return ids of every vessel seated on this board."""
        indices = np.unique(self.vessels)
        return frozenset(FLEET[int(index) - 1].id for index in indices if index != 0)

    def vessel_cells(self, vessel_id: str) -> list[Coord]:
        index = _vessel_index(vessel_id)
        ys, xs = np.nonzero(self.vessels == index)
        return sorted(Coord(int(x), int(y)) for y, x in zip(ys, xs, strict=True))

    def is_vessel_sunk(self, vessel_id: str) -> bool:
        """Return whether every cell of a seated vessel is hit."""
        mask = self.vessels == _vessel_index(vessel_id)
        if not mask.any():
            return False
        return bool(np.all(self.shots[mask] == _HIT))

    def remaining_vessel_cells(self) -> int:
        """Count vessel cells still hidden."""
        return int(np.count_nonzero((self.vessels != 0) & (self.shots == _HIDDEN)))

    def all_vessels_sunk(self) -> bool:
        """Return whether no hidden vessel cell remains."""
        return self.remaining_vessel_cells() == 0

    def hidden_cells(self) -> list[Coord]:
        ys, xs = np.nonzero(self.shots == _HIDDEN)
        return [Coord(int(x), int(y)) for y, x in zip(ys, xs, strict=True)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(
            np.array_equal(self.vessels, other.vessels) and np.array_equal(self.shots, other.shots)
        )

    __hash__ = None  # type: ignore[assignment]

    def render(self, *, reveal: bool = True) -> str:
        """Return a plain-text grid (`#` vessel, `X` hit, `o` miss, `.` water)."""
        rows: list[str] = []
        for y in range(self.size):
            chars: list[str] = []
            for x in range(self.size):
                code = int(self.shots[y, x])
                if code == _HIT:
                    chars.append("X")
                elif code == _MISS:
                    chars.append("o")
                elif reveal and int(self.vessels[y, x]) != 0:
                    chars.append("#")
                else:
                    chars.append(".")
            rows.append(" ".join(chars))
        return "\n".join(rows)


def empty_board(size: int = BOARD_SIZE) -> Board:
    """Create a board of water cells, all hidden."""
    return Board(
        vessels=_frozen(np.zeros((size, size), dtype=np.int8)),
        shots=_frozen(np.zeros((size, size), dtype=np.int8)),
    )


def cell_at(board: Board, x: int, y: int) -> Cell:
    """Return the cell at (x, y); raises OutOfBoundsError outside the board."""
    return board.cell(x, y)


def set_vessel(board: Board, cells: Iterable[Coord], vessel_id: str) -> Board:
    """Write vessel terrain into each listed cell.

    Callers are expected to validate legality first; this only refuses to
    write over another vessel or outside the board.
    """
    index = _vessel_index(vessel_id)
    vessels = board.vessels.copy()
    for coord in cells:
        if not board.in_bounds(coord.x, coord.y):
            raise OutOfBoundsError(coord.x, coord.y, board.size)
        if vessels[coord.y, coord.x] != 0:
            raise InvalidPlacementError(f"cell ({coord.x}, {coord.y}) is already occupied")
        vessels[coord.y, coord.x] = index
    return Board(vessels=_frozen(vessels), shots=board.shots)


def remove_vessel(board: Board, vessel_id: str) -> Board:
    """Revert a vessel's cells to water/hidden."""
    mask = board.vessels == _vessel_index(vessel_id)
    vessels = board.vessels.copy()
    shots = board.shots.copy()
    vessels[mask] = 0
    shots[mask] = _HIDDEN
    return Board(vessels=_frozen(vessels), shots=_frozen(shots))


def mark_shot(board: Board, x: int, y: int, hit: bool) -> Board:
    """Return a board where (x, y) is resolved as hit or miss."""
    if not board.in_bounds(x, y):
        raise OutOfBoundsError(x, y, board.size)
    if int(board.shots[y, x]) != _HIDDEN:
        raise AlreadyShotError(x, y)
    if hit and int(board.vessels[y, x]) == 0:
        raise InvalidShotError(f"cell ({x}, {y}) is water and cannot be hit")
    shots = board.shots.copy()
    shots[y, x] = _HIT if hit else _MISS
    return Board(vessels=board.vessels, shots=_frozen(shots))


def _vessel_index(vessel_id: str) -> int:
    index = _VESSEL_INDEX.get(vessel_id)
    if index is None:
        raise InvalidPlacementError(f"unknown vessel id: {vessel_id}")
    return index
