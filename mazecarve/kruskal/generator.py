"""Maze dataset generator built on randomized Kruskal carving."""

from __future__ import annotations

import argparse
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..base import AbstractMazeGenerator, PathLike
from .builder import generate_maze
from .grid import validate_dimension
from .layout import PATH, grid_position, to_grid
from .model import Wall

MIN_DIMENSION = 7
MAX_DIMENSION = 50

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)


@dataclass
class MazeRecord:
    id: str
    dimension: int
    seed: int
    removed_walls: List[Wall]
    maze_grid: List[List[int]]
    cell_size: int
    wall_thickness: int
    canvas_dimensions: Tuple[int, int]
    maze_image_path: str
    animation_path: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "dimension": self.dimension,
            "seed": self.seed,
            "removed_walls": [wall.to_list() for wall in self.removed_walls],
            "maze_grid": self.maze_grid,
            "cell_size": self.cell_size,
            "wall_thickness": self.wall_thickness,
            "canvas_dimensions": list(self.canvas_dimensions),
            "maze_image_path": self.maze_image_path,
            "animation_path": self.animation_path,
        }


class KruskalMazeGenerator(AbstractMazeGenerator[MazeRecord]):
    """Carve perfect mazes and render them as PNG images."""

    def __init__(
        self,
        output_dir: PathLike = "data/mazes",
        *,
        dimension: int = 15,
        cell_size: int = 16,
        wall_thickness: Optional[int] = None,
        animate: bool = False,
        frame_stride: int = 1,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(output_dir, seed=seed)
        validate_dimension(dimension)
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if frame_stride <= 0:
            raise ValueError("frame_stride must be positive")
        self.dimension = dimension
        self.cell_size = cell_size
        self.wall_thickness = wall_thickness if wall_thickness is not None else max(1, cell_size // 4)
        if self.wall_thickness <= 0:
            raise ValueError("wall_thickness must be positive")
        self.animate = animate
        self.frame_stride = frame_stride

        self.maze_dir = self.output_dir / "mazes"
        self.maze_dir.mkdir(parents=True, exist_ok=True)

    def create_puzzle(self, *, puzzle_id: Optional[str] = None, seed: Optional[int] = None) -> MazeRecord:
        maze_uuid = puzzle_id or str(uuid.uuid4())
        if seed is None:
            seed = self.draw_seed()
        canvas_dims = self._canvas_dimensions()

        recorder = _FrameRecorder(self, self._blank_canvas(canvas_dims)) if self.animate else None
        removed = generate_maze(self.dimension, seed, sink=recorder)
        maze_grid = to_grid(self.dimension, removed)
        image = self._render(maze_grid, canvas_dims)

        image_path = self.maze_dir / f"{maze_uuid}_maze.png"
        image.save(image_path)

        animation_path: Optional[str] = None
        if recorder is not None:
            gif_path = self.maze_dir / f"{maze_uuid}_carving.gif"
            recorder.save(gif_path, final=image)
            animation_path = self.relativize_path(gif_path)

        return MazeRecord(
            id=maze_uuid,
            dimension=self.dimension,
            seed=seed,
            removed_walls=removed,
            maze_grid=maze_grid.tolist(),
            cell_size=self.cell_size,
            wall_thickness=self.wall_thickness,
            canvas_dimensions=canvas_dims,
            maze_image_path=self.relativize_path(image_path),
            animation_path=animation_path,
        )

    # ------------------------------------------------------------------

    def _tile_span(self, index: int) -> Tuple[int, int]:
        # Even tile indices are wall strips, odd ones are cell interiors.
        start = (index // 2) * (self.cell_size + self.wall_thickness)
        if index % 2:
            start += self.wall_thickness
            return start, start + self.cell_size
        return start, start + self.wall_thickness

    def _tile_box(self, row: int, col: int) -> Tuple[int, int, int, int]:
        top, bottom = self._tile_span(row)
        left, right = self._tile_span(col)
        return left, top, right - 1, bottom - 1

    def _canvas_dimensions(self) -> Tuple[int, int]:
        side = self.dimension * self.cell_size + (self.dimension + 1) * self.wall_thickness
        return side, side

    def _blank_canvas(self, canvas_dims: Tuple[int, int]) -> Image.Image:
        """Canvas with every cell open and every wall still standing."""

        return self._render(to_grid(self.dimension, ()), canvas_dims)

    def open_wall(self, draw: ImageDraw.ImageDraw, wall: Wall) -> None:
        """Paint the gap left by a removed wall onto a canvas of this generator's size."""

        (r1, c1), (r2, c2) = grid_position(wall.one), grid_position(wall.two)
        draw.rectangle(self._tile_box((r1 + r2) // 2, (c1 + c2) // 2), fill=PATH_COLOR)

    def _render(self, grid: np.ndarray, canvas_dims: Tuple[int, int]) -> Image.Image:
        canvas = Image.new("RGB", canvas_dims, WALL_COLOR)
        draw = ImageDraw.Draw(canvas)
        rows, cols = np.nonzero(grid == PATH)
        for r, c in zip(rows.tolist(), cols.tolist()):
            draw.rectangle(self._tile_box(r, c), fill=PATH_COLOR)
        return canvas


class _FrameRecorder:
    """Wall sink that snapshots the canvas as walls are knocked down."""

    def __init__(self, generator: KruskalMazeGenerator, canvas: Image.Image) -> None:
        self._generator = generator
        self._canvas = canvas
        self._draw = ImageDraw.Draw(canvas)
        self.removed = 0
        self.frames: List[Image.Image] = [canvas.copy()]

    def __call__(self, wall: Wall) -> None:
        self._generator.open_wall(self._draw, wall)
        self.removed += 1
        if self.removed % self._generator.frame_stride == 0:
            self.frames.append(self._canvas.copy())

    def save(self, path: Path, *, final: Image.Image, duration: int = 40) -> None:
        frames = self.frames + [final]
        frames[0].save(path, save_all=True, append_images=frames[1:], duration=duration, loop=0)


__all__ = ["KruskalMazeGenerator", "MazeRecord", "MIN_DIMENSION", "MAX_DIMENSION"]


def _dimension(value: str) -> int:
    dimension = int(value)
    if not MIN_DIMENSION <= dimension <= MAX_DIMENSION:
        raise argparse.ArgumentTypeError(
            f"dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}, inclusive"
        )
    return dimension


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate perfect mazes with randomized Kruskal carving")
    parser.add_argument("count", type=int, help="Number of mazes to generate")
    parser.add_argument("--dimension", type=_dimension, default=15, help="Cells per side of the square maze")
    parser.add_argument("--output-dir", type=Path, default=Path("data/mazes"), help="Where to save assets")
    parser.add_argument("--cell-size", type=int, default=16)
    parser.add_argument("--wall-thickness", type=int, default=None)
    parser.add_argument("--animate", action="store_true", help="Also save a GIF of the walls being removed")
    parser.add_argument("--frame-stride", type=int, default=1, help="Removals per animation frame")
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    generator = KruskalMazeGenerator(
        output_dir=args.output_dir,
        dimension=args.dimension,
        cell_size=args.cell_size,
        wall_thickness=args.wall_thickness,
        animate=args.animate,
        frame_stride=args.frame_stride,
        seed=args.seed,
    )
    metadata_path = generator.output_dir / "mazes.json"
    records = generator.generate_dataset(args.count, metadata_path=metadata_path)
    print(f"Wrote {len(records)} mazes to {metadata_path}")


if __name__ == "__main__":
    main()
