import itertools
import random
import unittest
from collections import deque

from mazecarve.kruskal import (
    Cell,
    ComponentTracker,
    DisjointSetTracker,
    InvalidDimension,
    Wall,
    carve,
    enumerate_cells,
    enumerate_walls,
    generate_maze,
    shuffle_walls,
)


def reachable_from_origin(walls):
    neighbours = {}
    for wall in walls:
        neighbours.setdefault(wall.one, set()).add(wall.two)
        neighbours.setdefault(wall.two, set()).add(wall.one)
    start = Cell(0, 0)
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nxt in neighbours.get(cell, ()):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


class GenerateMazeTests(unittest.TestCase):
    def assertPerfectMaze(self, dimension, removed) -> None:
        self.assertEqual(len(removed), dimension * dimension - 1)
        self.assertEqual(len(set(removed)), len(removed))
        for wall in removed:
            self.assertTrue(wall.one.is_adjacent(wall.two))
            for cell in wall:
                self.assertTrue(0 <= cell.row < dimension and 0 <= cell.col < dimension)
        # N^2 - 1 edges that reach every cell can only be a tree.
        self.assertEqual(reachable_from_origin(removed), set(enumerate_cells(dimension)))

    def test_mazes_are_spanning_trees(self) -> None:
        for dimension in (1, 2, 3, 7, 15):
            for seed in range(3):
                self.assertPerfectMaze(dimension, generate_maze(dimension, seed))

    def test_single_cell_maze(self) -> None:
        self.assertEqual(generate_maze(1), [])

    def test_seed_is_deterministic(self) -> None:
        self.assertEqual(generate_maze(9, 42), generate_maze(9, 42))
        self.assertNotEqual(generate_maze(9, 1), generate_maze(9, 2))

    def test_shared_rng_advances(self) -> None:
        rng = random.Random(3)
        first = generate_maze(6, rng=rng)
        second = generate_maze(6, rng=rng)
        self.assertNotEqual(first, second)
        self.assertPerfectMaze(6, second)

    def test_trackers_agree(self) -> None:
        for seed in range(5):
            self.assertEqual(
                generate_maze(8, seed, tracker_factory=ComponentTracker),
                generate_maze(8, seed, tracker_factory=DisjointSetTracker),
            )

    def test_sink_receives_walls_in_emission_order(self) -> None:
        seen = []
        removed = generate_maze(7, 11, sink=seen.append)
        self.assertEqual(seen, removed)

    def test_invalid_dimension(self) -> None:
        with self.assertRaises(InvalidDimension):
            generate_maze(0)


class CarveTests(unittest.TestCase):
    def test_fixed_order_is_processed_last_to_first(self) -> None:
        cells = enumerate_cells(2)
        walls = enumerate_walls(2)
        removed = carve(cells, walls)
        # The first enumerated wall would close the loop once the other three are gone.
        self.assertEqual(removed, list(reversed(walls[1:])))
        self.assertEqual(
            [wall.to_list() for wall in removed],
            [[[1, 0], [1, 1]], [[0, 1], [1, 1]], [[0, 0], [1, 0]]],
        )

    def test_every_two_by_two_order_rejects_exactly_one_wall(self) -> None:
        cells = enumerate_cells(2)
        for order in itertools.permutations(enumerate_walls(2)):
            removed = carve(cells, list(order))
            self.assertEqual(len(removed), 3)
            self.assertEqual(reachable_from_origin(removed), set(cells))
            rejected = set(order) - set(removed)
            self.assertEqual(len(rejected), 1)

    def test_carve_is_repeatable_for_a_fixed_shuffle(self) -> None:
        cells = enumerate_cells(10)
        shuffled = shuffle_walls(enumerate_walls(10), random.Random(5).randint)
        self.assertEqual(carve(cells, shuffled), carve(cells, shuffled))
        self.assertEqual(
            carve(cells, shuffled),
            carve(cells, shuffled, tracker=DisjointSetTracker(cells)),
        )

    def test_repeated_wall_is_rejected_once_its_cells_are_joined(self) -> None:
        cells = enumerate_cells(2)
        walls = enumerate_walls(2)
        repeated = Wall(Cell(1, 1), Cell(1, 0))
        removed = carve(cells, [repeated] + walls)
        self.assertEqual(removed, [walls[3], walls[2], walls[1]])
        self.assertEqual(removed.count(repeated), 1)


if __name__ == "__main__":
    unittest.main()
