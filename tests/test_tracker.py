import unittest

from mazecarve.kruskal import (
    Cell,
    ComponentTracker,
    DisjointSetTracker,
    InvariantViolation,
    enumerate_cells,
)


class TrackerContract:
    """Behaviour shared by every connectivity tracker."""

    tracker_cls = None

    def setUp(self) -> None:
        self.cells = enumerate_cells(3)
        self.tracker = self.tracker_cls(self.cells)

    def assertPartition(self) -> None:
        seen = set(self.tracker.unmerged)
        for component in self.tracker.components():
            self.assertGreater(len(component), 1)
            self.assertFalse(seen & component)
            seen |= component
        self.assertEqual(seen, set(self.cells))

    def test_initially_nothing_is_connected(self) -> None:
        for a in self.cells:
            for b in self.cells:
                self.assertEqual(self.tracker.connected(a, b), a == b)
        self.assertEqual(self.tracker.component_count, 9)
        self.assertEqual(self.tracker.components(), [])
        self.assertEqual(set(self.tracker.unmerged), set(self.cells))

    def test_union_of_two_unmerged_cells(self) -> None:
        self.tracker.union(Cell(0, 0), Cell(0, 1))
        self.assertTrue(self.tracker.connected(Cell(0, 1), Cell(0, 0)))
        self.assertEqual(self.tracker.components(), [frozenset({Cell(0, 0), Cell(0, 1)})])
        self.assertNotIn(Cell(0, 0), self.tracker.unmerged)
        self.assertPartition()

    def test_unmerged_cell_joins_component(self) -> None:
        self.tracker.union(Cell(0, 0), Cell(0, 1))
        self.tracker.union(Cell(1, 1), Cell(0, 1))
        self.assertTrue(self.tracker.connected(Cell(0, 0), Cell(1, 1)))
        self.assertEqual(self.tracker.component_count, 7)
        self.assertPartition()

    def test_two_components_merge(self) -> None:
        self.tracker.union(Cell(0, 0), Cell(0, 1))
        self.tracker.union(Cell(2, 2), Cell(2, 1))
        self.assertFalse(self.tracker.connected(Cell(0, 0), Cell(2, 2)))
        self.tracker.union(Cell(0, 1), Cell(1, 1))
        self.tracker.union(Cell(1, 1), Cell(2, 1))
        self.assertTrue(self.tracker.connected(Cell(0, 0), Cell(2, 2)))
        self.assertEqual(len(self.tracker.components()), 1)
        self.assertEqual(self.tracker.component_count, 1 + 4)
        self.assertPartition()

    def test_union_of_connected_cells_is_a_contract_violation(self) -> None:
        self.tracker.union(Cell(0, 0), Cell(0, 1))
        self.tracker.union(Cell(0, 1), Cell(1, 1))
        with self.assertRaises(InvariantViolation):
            self.tracker.union(Cell(1, 1), Cell(0, 0))
        with self.assertRaises(InvariantViolation):
            self.tracker.union(Cell(2, 2), Cell(2, 2))
        self.assertPartition()

    def test_unknown_cells_are_rejected(self) -> None:
        with self.assertRaises(KeyError):
            self.tracker.connected(Cell(0, 0), Cell(5, 5))
        with self.assertRaises(KeyError):
            self.tracker.union(Cell(5, 5), Cell(5, 4))

    def test_merging_everything_leaves_one_component(self) -> None:
        for a, b in zip(self.cells, self.cells[1:]):
            self.tracker.union(a, b)
            self.assertPartition()
        self.assertEqual(self.tracker.component_count, 1)
        self.assertEqual(self.tracker.components(), [frozenset(self.cells)])
        self.assertEqual(set(self.tracker.unmerged), set())


class ComponentTrackerTests(TrackerContract, unittest.TestCase):
    tracker_cls = ComponentTracker


class DisjointSetTrackerTests(TrackerContract, unittest.TestCase):
    tracker_cls = DisjointSetTracker

    def test_find_returns_shared_root(self) -> None:
        self.tracker.union(Cell(0, 0), Cell(0, 1))
        self.tracker.union(Cell(0, 2), Cell(0, 1))
        roots = {self.tracker.find(Cell(0, c)) for c in range(3)}
        self.assertEqual(len(roots), 1)


if __name__ == "__main__":
    unittest.main()
