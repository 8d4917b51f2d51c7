"""Exceptions raised by the maze carving core."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for maze carving failures."""


class InvalidDimension(MazeError, ValueError):
    """Raised when a grid dimension is not a positive integer."""

    def __init__(self, dimension: object) -> None:
        super().__init__(f"Maze dimension must be a positive integer, got {dimension!r}")
        self.dimension = dimension


class InvariantViolation(MazeError, AssertionError):
    """Raised when the connectivity bookkeeping is asked to do something impossible."""


__all__ = ["MazeError", "InvalidDimension", "InvariantViolation"]
