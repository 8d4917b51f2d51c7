"""Verifier for persisted maze records."""

from __future__ import annotations

import argparse
import json
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Set

import numpy as np

from ..base import AbstractMazeEvaluator
from .layout import to_grid
from .model import Cell, Wall


@dataclass
class MazeEvaluationResult:
    puzzle_id: str
    dimension: int
    removed_count: int
    expected_count: int
    all_adjacent: bool
    has_duplicates: bool
    has_cycle: bool
    connected: bool
    grid_matches: bool
    image_found: bool
    message: str

    @property
    def is_perfect(self) -> bool:
        return (
            self.all_adjacent
            and not self.has_duplicates
            and not self.has_cycle
            and self.connected
            and self.removed_count == self.expected_count
        )

    def to_dict(self) -> dict:
        return {
            "puzzle_id": self.puzzle_id,
            "dimension": self.dimension,
            "removed_count": self.removed_count,
            "expected_count": self.expected_count,
            "all_adjacent": self.all_adjacent,
            "has_duplicates": self.has_duplicates,
            "has_cycle": self.has_cycle,
            "connected": self.connected,
            "grid_matches": self.grid_matches,
            "image_found": self.image_found,
            "is_perfect": self.is_perfect,
            "message": self.message,
        }


class KruskalMazeEvaluator(AbstractMazeEvaluator[MazeEvaluationResult]):
    """Check that stored mazes are spanning trees over their grid.

    The check only trusts the raw wall list in the record: it rebuilds the
    passage graph and walks it breadth-first, without reusing any of the
    carving bookkeeping.
    """

    def evaluate(self, puzzle_id: str) -> MazeEvaluationResult:
        record = self.get_record(puzzle_id)
        dimension = self._read_dimension(record)
        raw_walls = record.get("removed_walls", [])
        image_path = record.get("maze_image_path")
        image_found = image_path is not None and self.resolve_path(image_path).exists()

        if dimension < 1 or not isinstance(raw_walls, list):
            return self._finish(
                puzzle_id=puzzle_id,
                dimension=dimension,
                removed_count=len(raw_walls) if isinstance(raw_walls, list) else 0,
                expected_count=max(dimension * dimension - 1, 0),
                all_adjacent=False,
                has_duplicates=False,
                has_cycle=False,
                connected=False,
                grid_matches=False,
                image_found=image_found,
            )

        walls: List[Wall] = []
        all_adjacent = True
        for raw in raw_walls:
            try:
                wall = Wall.from_list(raw)
            except (TypeError, ValueError):
                all_adjacent = False
                continue
            if not all(self._in_bounds(cell, dimension) for cell in wall):
                all_adjacent = False
                continue
            walls.append(wall)

        unique = set(walls)
        has_duplicates = len(unique) != len(walls)
        component_count = self._count_components(dimension, unique)
        cell_count = dimension * dimension
        # A forest over V vertices with k components has exactly V - k edges.
        has_cycle = len(unique) > cell_count - component_count
        connected = component_count == 1

        try:
            stored_grid = np.asarray(record.get("maze_grid", []), dtype=np.int8)
        except (TypeError, ValueError):
            grid_matches = False
        else:
            grid_matches = bool(np.array_equal(stored_grid, to_grid(dimension, unique)))

        return self._finish(
            puzzle_id=puzzle_id,
            dimension=dimension,
            removed_count=len(raw_walls),
            expected_count=cell_count - 1,
            all_adjacent=all_adjacent,
            has_duplicates=has_duplicates,
            has_cycle=has_cycle,
            connected=connected,
            grid_matches=grid_matches,
            image_found=image_found,
        )

    # ------------------------------------------------------------------

    def _finish(self, **fields: Any) -> MazeEvaluationResult:
        result = MazeEvaluationResult(message="", **fields)
        result.message = self._describe(result)
        return result

    @staticmethod
    def _read_dimension(record: Dict[str, Any]) -> int:
        value = record.get("dimension")
        if isinstance(value, bool) or not isinstance(value, int):
            return 0
        return value

    @staticmethod
    def _in_bounds(cell: Cell, dimension: int) -> bool:
        return 0 <= cell.row < dimension and 0 <= cell.col < dimension

    @staticmethod
    def _count_components(dimension: int, walls: Set[Wall]) -> int:
        neighbours: Dict[Cell, List[Cell]] = {}
        for wall in walls:
            neighbours.setdefault(wall.one, []).append(wall.two)
            neighbours.setdefault(wall.two, []).append(wall.one)

        seen: Set[Cell] = set()
        components = 0
        for r in range(dimension):
            for c in range(dimension):
                start = Cell(r, c)
                if start in seen:
                    continue
                components += 1
                seen.add(start)
                queue = deque([start])
                while queue:
                    cell = queue.popleft()
                    for nxt in neighbours.get(cell, ()):
                        if nxt not in seen:
                            seen.add(nxt)
                            queue.append(nxt)
        return components

    @staticmethod
    def _describe(result: MazeEvaluationResult) -> str:
        if result.dimension < 1:
            return "Maze dimension must be a positive integer."
        if not result.all_adjacent:
            return "Removed walls include cells that are not grid neighbours."
        if result.has_duplicates:
            return "A wall is removed more than once."
        if result.has_cycle:
            return "Removed walls open a loop in the maze."
        if not result.connected:
            return "Some cells cannot be reached from the rest of the maze."
        if result.removed_count != result.expected_count:
            return f"Expected {result.expected_count} removed walls, found {result.removed_count}."
        if not result.grid_matches:
            return "Maze is perfect but the stored grid does not match its walls."
        return "Maze is a perfect spanning tree."


__all__ = ["KruskalMazeEvaluator", "MazeEvaluationResult"]


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Verify generated mazes")
    parser.add_argument("metadata", type=Path, help="Path to maze metadata JSON")
    parser.add_argument("puzzle_id", type=str, nargs="?", default=None, help="Maze to check (all when omitted)")
    parser.add_argument("--base-dir", type=Path, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    evaluator = KruskalMazeEvaluator(args.metadata, base_dir=args.base_dir)
    if args.puzzle_id is not None:
        print(json.dumps(evaluator.evaluate(args.puzzle_id).to_dict(), indent=2))
    else:
        print(json.dumps([result.to_dict() for result in evaluator.evaluate_all()], indent=2))


if __name__ == "__main__":
    main()
