"""Cell and wall enumeration for square grids."""

from __future__ import annotations

from typing import List

from .errors import InvalidDimension
from .model import Cell, Wall


def validate_dimension(dimension: object) -> int:
    if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension < 1:
        raise InvalidDimension(dimension)
    return dimension


def enumerate_cells(dimension: int) -> List[Cell]:
    """Return every cell of a ``dimension`` x ``dimension`` grid in row-major order."""

    validate_dimension(dimension)
    return [Cell(r, c) for r in range(dimension) for c in range(dimension)]


def enumerate_walls(dimension: int) -> List[Wall]:
    """Return every interior wall exactly once.

    Each cell contributes the wall to its eastern neighbour and then the
    wall to its southern neighbour, when those neighbours exist.
    """

    validate_dimension(dimension)
    walls: List[Wall] = []
    for r in range(dimension):
        for c in range(dimension):
            here = Cell(r, c)
            if c + 1 < dimension:
                walls.append(Wall(here, Cell(r, c + 1)))
            if r + 1 < dimension:
                walls.append(Wall(here, Cell(r + 1, c)))
    return walls


def wall_count(dimension: int) -> int:
    validate_dimension(dimension)
    return 2 * dimension * (dimension - 1)


__all__ = ["validate_dimension", "enumerate_cells", "enumerate_walls", "wall_count"]
