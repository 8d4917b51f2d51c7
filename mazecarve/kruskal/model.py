"""Value types for grid cells and the walls between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True, order=True)
class Cell:
    row: int
    col: int

    def is_adjacent(self, other: "Cell") -> bool:
        return abs(self.row - other.row) + abs(self.col - other.col) == 1

    def to_list(self) -> List[int]:
        return [self.row, self.col]

    @classmethod
    def from_list(cls, values: Sequence[int]) -> "Cell":
        row, col = values
        return cls(int(row), int(col))


@dataclass(frozen=True, eq=False)
class Wall:
    """Undirected barrier between two grid-adjacent cells.

    ``Wall(a, b)`` and ``Wall(b, a)`` compare and hash equal; the
    construction order is only kept for serialization.
    """

    one: Cell
    two: Cell

    def __post_init__(self) -> None:
        if not self.one.is_adjacent(self.two):
            raise ValueError(f"Cells {self.one} and {self.two} are not grid-adjacent")

    @property
    def cells(self) -> frozenset:
        return frozenset((self.one, self.two))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wall):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def __iter__(self):
        yield self.one
        yield self.two

    def to_list(self) -> List[List[int]]:
        return [self.one.to_list(), self.two.to_list()]

    @classmethod
    def from_list(cls, values: Sequence[Sequence[int]]) -> "Wall":
        one, two = values
        return cls(Cell.from_list(one), Cell.from_list(two))


__all__ = ["Cell", "Wall"]
