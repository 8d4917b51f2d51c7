"""Perfect maze generation toolkit."""

__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeEvaluator",
    "Cell",
    "Wall",
    "MazeError",
    "InvalidDimension",
    "InvariantViolation",
    "generate_maze",
    "KruskalMazeGenerator",
    "MazeRecord",
    "KruskalMazeEvaluator",
    "MazeEvaluationResult",
]

from .base import AbstractMazeGenerator, AbstractMazeEvaluator
from .kruskal import (
    Cell,
    Wall,
    MazeError,
    InvalidDimension,
    InvariantViolation,
    generate_maze,
    KruskalMazeGenerator,
    MazeRecord,
    KruskalMazeEvaluator,
    MazeEvaluationResult,
)
