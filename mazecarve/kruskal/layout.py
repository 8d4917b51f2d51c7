"""Passage-grid representation of a carved maze."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from .grid import validate_dimension
from .model import Cell, Wall

WALL = 1
PATH = 0


def grid_position(cell: Cell) -> Tuple[int, int]:
    return 2 * cell.row + 1, 2 * cell.col + 1


def to_grid(dimension: int, removed: Iterable[Wall]) -> np.ndarray:
    """Expand a maze into a ``(2N+1, 2N+1)`` array of WALL/PATH tiles.

    Cell ``(r, c)`` sits at tile ``(2r+1, 2c+1)``; the tile between two
    cells is opened when the wall separating them was removed.
    """

    validate_dimension(dimension)
    size = 2 * dimension + 1
    grid = np.full((size, size), WALL, dtype=np.int8)
    grid[1::2, 1::2] = PATH
    for wall in removed:
        (r1, c1), (r2, c2) = grid_position(wall.one), grid_position(wall.two)
        grid[(r1 + r2) // 2, (c1 + c2) // 2] = PATH
    return grid


__all__ = ["WALL", "PATH", "grid_position", "to_grid"]
