"""Randomized Kruskal maze carving and its dataset tooling."""

__all__ = [
    "Cell",
    "Wall",
    "MazeError",
    "InvalidDimension",
    "InvariantViolation",
    "enumerate_cells",
    "enumerate_walls",
    "shuffle_walls",
    "ConnectivityTracker",
    "ComponentTracker",
    "DisjointSetTracker",
    "carve",
    "generate_maze",
    "to_grid",
    "KruskalMazeGenerator",
    "MazeRecord",
    "KruskalMazeEvaluator",
    "MazeEvaluationResult",
]

from .model import Cell, Wall
from .errors import MazeError, InvalidDimension, InvariantViolation
from .grid import enumerate_cells, enumerate_walls
from .shuffle import shuffle_walls
from .tracker import ConnectivityTracker, ComponentTracker, DisjointSetTracker
from .builder import carve, generate_maze
from .layout import to_grid
from .generator import KruskalMazeGenerator, MazeRecord
from .evaluator import KruskalMazeEvaluator, MazeEvaluationResult
