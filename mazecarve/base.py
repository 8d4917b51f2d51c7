"""Shared scaffolding for maze dataset generators and verifiers."""

from __future__ import annotations

import json
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Generic, Iterable, List, Optional, Protocol, TypeVar, Union

PathLike = Union[str, Path]
RecordT = TypeVar("RecordT", bound="SupportsToDict")
ResultT = TypeVar("ResultT")

SEED_SPACE = 2**32


class SupportsToDict(Protocol):
    def to_dict(self) -> Dict[str, Any]: ...


def read_records(metadata_path: PathLike) -> List[Dict[str, Any]]:
    """Load a metadata file, which must hold a JSON list of records."""

    raw = json.loads(Path(metadata_path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError("Maze metadata must be a list of records")
    return raw


def write_records(
    metadata_path: PathLike,
    payload: Iterable[Dict[str, Any]],
    *,
    append: bool = True,
) -> None:
    path = Path(metadata_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    existing: List[Dict[str, Any]] = []
    if append and path.exists():
        existing = read_records(path)
    path.write_text(json.dumps(existing + list(payload), indent=2), encoding="utf-8")


class AbstractMazeGenerator(ABC, Generic[RecordT]):
    """Base class for dataset builders that emit one record per maze.

    A generator owns a seeded ``random.Random``; every random maze draws its
    own seed from it, so a record can always be rebuilt from the seed it
    stores.
    """

    def __init__(self, output_dir: PathLike, *, seed: Optional[int] = None) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._rng = random.Random(seed)

    @abstractmethod
    def create_puzzle(self, *, puzzle_id: Optional[str] = None, seed: Optional[int] = None) -> RecordT:
        """Create a maze record, carving with ``seed`` when one is given."""

    def draw_seed(self) -> int:
        return self._rng.randrange(SEED_SPACE)

    def create_random_puzzle(self) -> RecordT:
        return self.create_puzzle(seed=self.draw_seed())

    def generate_dataset(
        self,
        count: int,
        *,
        metadata_path: Optional[PathLike] = None,
        append: bool = True,
    ) -> List[RecordT]:
        """Generate a batch of mazes and optionally persist their metadata."""

        records = [self.create_random_puzzle() for _ in range(count)]
        if metadata_path is not None:
            write_records(metadata_path, (record.to_dict() for record in records), append=append)
        return records

    def relativize_path(self, path: Path) -> str:
        try:
            return path.relative_to(self.output_dir).as_posix()
        except ValueError:
            return path.as_posix()


class AbstractMazeEvaluator(ABC, Generic[ResultT]):
    """Base class for verifiers that reload persisted maze records by id."""

    def __init__(
        self,
        metadata_path: PathLike,
        *,
        base_dir: Optional[PathLike] = None,
    ) -> None:
        self.metadata_path = Path(metadata_path)
        if not self.metadata_path.exists():
            raise FileNotFoundError(f"Metadata file not found: {self.metadata_path}")
        self.base_dir = Path(base_dir) if base_dir is not None else self.metadata_path.parent
        self._records: Dict[str, Dict[str, Any]] = {}
        for record in read_records(self.metadata_path):
            maze_id = record.get("id")
            if not maze_id:
                raise ValueError("Each maze record must include an 'id'")
            self._records[str(maze_id)] = record

    def get_record(self, puzzle_id: str) -> Dict[str, Any]:
        try:
            return self._records[puzzle_id]
        except KeyError as exc:
            raise KeyError(f"Maze id '{puzzle_id}' not found in metadata") from exc

    def resolve_path(self, path_value: object) -> Path:
        candidate = Path(str(path_value))
        if not candidate.is_absolute():
            candidate = self.base_dir / candidate
        return candidate

    @abstractmethod
    def evaluate(self, puzzle_id: str) -> ResultT:
        """Verify the stored maze with the given id."""

    def evaluate_all(self) -> List[ResultT]:
        return [self.evaluate(puzzle_id) for puzzle_id in self._records]


__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeEvaluator",
    "PathLike",
    "SEED_SPACE",
    "read_records",
    "write_records",
]
