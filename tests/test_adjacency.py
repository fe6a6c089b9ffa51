import random
import unittest
import sys
import os
from collections import Counter

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.core.adjacency import INVALID_CELL
from maze_stepper.core.errors import NoValidNeighbor
from maze_stepper.core.flags import CellFlag, is_unset
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.index import Cardinal, Index2D


def not_invalid(cell):
    return is_unset(cell, CellFlag.INVALID)


class TestAdjacentCells(unittest.TestCase):
    def test_boundary_neighbor_counts(self):
        for rows, cols in [(2, 2), (3, 3), (4, 6), (7, 5)]:
            maze = Maze2D(rows, cols)
            for pos, _ in maze:
                on_row_edge = pos.row in (0, rows - 1)
                on_col_edge = pos.col in (0, cols - 1)
                if on_row_edge and on_col_edge:
                    expected = 2
                elif on_row_edge or on_col_edge:
                    expected = 3
                else:
                    expected = 4
                adjacent = maze.get_adjacent(pos)
                self.assertEqual(adjacent.valid_count(), expected, f"{pos} in {rows}x{cols}")
                self.assertEqual(len(adjacent), 4)

    def test_single_cell_is_all_invalid(self):
        adjacent = Maze2D(1, 1).get_adjacent((0, 0))
        self.assertEqual(adjacent.valid_count(), 0)
        for direction, cell in adjacent:
            self.assertEqual(cell, INVALID_CELL)

    def test_slots_hold_neighbour_cells(self):
        maze = Maze2D(3, 3)
        maze.set_flags((0, 1), CellFlag.RED)
        maze.set_flags((1, 2), CellFlag.GREEN)
        adjacent = maze.get_adjacent((1, 1))
        self.assertEqual(adjacent[Cardinal.NORTH], maze.get_cell((0, 1)))
        self.assertEqual(adjacent[Cardinal.EAST], maze.get_cell((1, 2)))
        self.assertEqual([d for d, _ in adjacent], list(Cardinal))
        self.assertEqual(adjacent.position_of(Cardinal.WEST), Index2D(1, 0))

    def test_count_where(self):
        maze = Maze2D(3, 3)
        maze.set_flags((0, 1), CellFlag.VISITED)
        adjacent = maze.get_adjacent((1, 1))
        self.assertEqual(adjacent.count_where(lambda c: c & CellFlag.VISITED), 1)
        self.assertEqual(adjacent.count_where_alt(lambda d, c: d in (Cardinal.EAST, Cardinal.WEST)), 2)

    def test_random_where_respects_predicate(self):
        maze = Maze2D(1, 3)
        adjacent = maze.get_adjacent((0, 0))
        rng = random.Random(3)
        for _ in range(50):
            direction, cell = adjacent.get_random_where(rng, not_invalid)
            self.assertEqual(direction, Cardinal.EAST)
            self.assertEqual(cell, int(CellFlag.EMPTY_PATH))

    def test_random_where_is_not_biased(self):
        adjacent = Maze2D(3, 3).get_adjacent((1, 1))
        rng = random.Random(1234)
        picks = Counter(adjacent.get_random_where(rng, not_invalid)[0] for _ in range(4000))
        self.assertEqual(set(picks), set(Cardinal))
        for direction in Cardinal:
            # 1000 expected per direction
            self.assertGreater(picks[direction], 850)
            self.assertLess(picks[direction], 1150)

    def test_random_where_alt(self):
        adjacent = Maze2D(3, 3).get_adjacent((1, 1))
        rng = random.Random(5)
        direction, _ = adjacent.get_random_where_alt(rng, lambda d, c: d == Cardinal.SOUTH)
        self.assertEqual(direction, Cardinal.SOUTH)

    def test_no_valid_neighbor(self):
        adjacent = Maze2D(1, 1).get_adjacent((0, 0))
        with self.assertRaisesRegex(NoValidNeighbor, "NORTH=INVALID"):
            adjacent.get_random_where(random.Random(0), not_invalid)
        with self.assertRaises(LookupError):
            adjacent.get_random_where_alt(random.Random(0), lambda d, c: not_invalid(c))


if __name__ == '__main__':
    unittest.main()
