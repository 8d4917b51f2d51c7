"""Uniform shuffling of wall sequences."""

from __future__ import annotations

from typing import Callable, List, Sequence

from .model import Wall

RandInt = Callable[[int, int], int]


def shuffle_walls(walls: Sequence[Wall], randint: RandInt) -> List[Wall]:
    """Return a uniformly random permutation of ``walls``.

    ``randint(lo, hi)`` must draw uniformly from the inclusive range. A wall
    is drawn from the remaining pool and appended until the pool is empty;
    the input sequence is left untouched.
    """

    remaining = list(walls)
    shuffled: List[Wall] = []
    while remaining:
        index = randint(0, len(remaining) - 1)
        shuffled.append(remaining.pop(index))
    return shuffled


__all__ = ["RandInt", "shuffle_walls"]
