"""Fleet placement validation (bounds, overlap, no-touching rule)."""

from __future__ import annotations

from arcade.battleship.core.board import Board
from arcade.battleship.core.models import Coord, Orientation, cells_for_placement

_NEIGHBOR_OFFSETS = tuple((dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1))


def is_legal_placement(
    board: Board, x: int, y: int, length: int, orientation: Orientation
) -> bool:
    """Return whether a vessel of `length` fits at (x, y) without touching another.

    Every resulting cell must be in bounds, and neither the cell nor any of
    its eight neighbours may already hold a vessel.
    """
    if length <= 0:
        return False
    cells = cells_for_placement(x, y, length, orientation)
    if not all(board.in_bounds(cell.x, cell.y) for cell in cells):
        return False
    return not touches_vessel(board, cells)


def touches_vessel(board: Board, cells: list[Coord]) -> bool:
    """Return whether any cell, or a cell around it, holds a vessel."""
    for cell in cells:
        for dx, dy in _NEIGHBOR_OFFSETS:
            if board.has_vessel(cell.x + dx, cell.y + dy):
                return True
    return False
