"""Randomized Kruskal carving of perfect mazes."""

from __future__ import annotations

import random
from typing import Callable, Iterable, List, Optional, Sequence

from .grid import enumerate_cells, enumerate_walls
from .model import Cell, Wall
from .shuffle import shuffle_walls
from .tracker import ComponentTracker, ConnectivityTracker

WallSink = Callable[[Wall], None]
TrackerFactory = Callable[[Iterable[Cell]], ConnectivityTracker]


def carve(
    cells: Iterable[Cell],
    walls: Sequence[Wall],
    *,
    tracker: Optional[ConnectivityTracker] = None,
    sink: Optional[WallSink] = None,
) -> List[Wall]:
    """Remove every wall that separates two still-disconnected regions.

    ``walls`` is walked from the last entry to the first. Accepted walls are
    returned in the order they were removed and, when ``sink`` is given,
    handed to it one at a time as they are accepted.
    """

    if tracker is None:
        tracker = ComponentTracker(cells)
    removed: List[Wall] = []
    for wall in reversed(walls):
        if tracker.connected(wall.one, wall.two):
            continue
        tracker.union(wall.one, wall.two)
        removed.append(wall)
        if sink is not None:
            sink(wall)
    return removed


def generate_maze(
    dimension: int,
    rng_seed: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
    sink: Optional[WallSink] = None,
    tracker_factory: TrackerFactory = ComponentTracker,
) -> List[Wall]:
    """Carve a perfect ``dimension`` x ``dimension`` maze.

    Returns the removed walls in removal order; there are always
    ``dimension ** 2 - 1`` of them. Pass ``rng`` to share a random source
    across calls, otherwise a fresh ``random.Random(rng_seed)`` is used.
    """

    cells = enumerate_cells(dimension)
    walls = enumerate_walls(dimension)
    if rng is None:
        rng = random.Random(rng_seed)
    shuffled = shuffle_walls(walls, rng.randint)
    return carve(cells, shuffled, tracker=tracker_factory(cells), sink=sink)


__all__ = ["WallSink", "TrackerFactory", "carve", "generate_maze"]
