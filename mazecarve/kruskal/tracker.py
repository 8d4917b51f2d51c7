"""Connectivity bookkeeping for cells joined by removed walls."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AbstractSet, Dict, FrozenSet, Iterable, List, Set

from .errors import InvariantViolation
from .model import Cell


class ConnectivityTracker(ABC):
    """Partition of a fixed cell set into connected components.

    Every cell starts out alone. ``union`` joins the components of two cells
    that are not yet connected; ``connected`` reports whether a path of
    removed walls already links them.
    """

    def __init__(self, cells: Iterable[Cell]) -> None:
        self._cells: FrozenSet[Cell] = frozenset(cells)

    @property
    def cells(self) -> FrozenSet[Cell]:
        return self._cells

    def _require(self, *cells: Cell) -> None:
        for cell in cells:
            if cell not in self._cells:
                raise KeyError(f"Cell {cell} is not tracked")

    @abstractmethod
    def connected(self, a: Cell, b: Cell) -> bool:
        """Return whether ``a`` and ``b`` already share a component."""

    @abstractmethod
    def union(self, a: Cell, b: Cell) -> None:
        """Join the components of ``a`` and ``b``."""

    @property
    @abstractmethod
    def unmerged(self) -> AbstractSet[Cell]:
        """Cells that have not joined any multi-cell component."""

    @abstractmethod
    def components(self) -> List[FrozenSet[Cell]]:
        """Merged components, excluding unmerged singletons."""

    @property
    def component_count(self) -> int:
        return len(self.components()) + len(self.unmerged)


class ComponentTracker(ConnectivityTracker):
    """Tracks merged components as a list of cell sets plus an unmerged pool.

    Lookups scan the component list, so each operation costs time linear in
    the number of components.
    """

    def __init__(self, cells: Iterable[Cell]) -> None:
        super().__init__(cells)
        self._unmerged: Set[Cell] = set(self._cells)
        self._merged: List[Set[Cell]] = []

    @property
    def unmerged(self) -> AbstractSet[Cell]:
        return frozenset(self._unmerged)

    def components(self) -> List[FrozenSet[Cell]]:
        return [frozenset(component) for component in self._merged]

    def _index_of(self, cell: Cell) -> int:
        for index, component in enumerate(self._merged):
            if cell in component:
                return index
        raise InvariantViolation(f"Cell {cell} is neither unmerged nor in a component")

    def connected(self, a: Cell, b: Cell) -> bool:
        self._require(a, b)
        if a == b:
            return True
        return any(a in component and b in component for component in self._merged)

    def union(self, a: Cell, b: Cell) -> None:
        if self.connected(a, b):
            raise InvariantViolation(f"Cells {a} and {b} are already connected")

        a_free = a in self._unmerged
        b_free = b in self._unmerged
        if a_free and b_free:
            self._unmerged.difference_update((a, b))
            self._merged.append({a, b})
        elif b_free:
            self._merged[self._index_of(a)].add(b)
            self._unmerged.discard(b)
        elif a_free:
            self._merged[self._index_of(b)].add(a)
            self._unmerged.discard(a)
        else:
            keep = self._index_of(a)
            evict = self._index_of(b)
            self._merged[keep] |= self._merged[evict]
            del self._merged[evict]


class DisjointSetTracker(ConnectivityTracker):
    """Disjoint-set forest with path compression and union by rank."""

    def __init__(self, cells: Iterable[Cell]) -> None:
        super().__init__(cells)
        self._parent: Dict[Cell, Cell] = {cell: cell for cell in self._cells}
        self._rank: Dict[Cell, int] = {cell: 0 for cell in self._cells}
        self._size: Dict[Cell, int] = {cell: 1 for cell in self._cells}

    def find(self, cell: Cell) -> Cell:
        self._require(cell)
        root = cell
        while self._parent[root] != root:
            root = self._parent[root]
        while cell != root:
            parent = self._parent[cell]
            self._parent[cell] = root
            cell = parent
        return root

    def connected(self, a: Cell, b: Cell) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: Cell, b: Cell) -> None:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            raise InvariantViolation(f"Cells {a} and {b} are already connected")

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1

    @property
    def unmerged(self) -> AbstractSet[Cell]:
        return frozenset(cell for cell in self._cells if self._size[self.find(cell)] == 1)

    def components(self) -> List[FrozenSet[Cell]]:
        groups: Dict[Cell, Set[Cell]] = {}
        for cell in self._cells:
            root = self.find(cell)
            if self._size[root] > 1:
                groups.setdefault(root, set()).add(cell)
        return [frozenset(group) for group in groups.values()]


__all__ = ["ConnectivityTracker", "ComponentTracker", "DisjointSetTracker"]
