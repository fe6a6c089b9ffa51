import random
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.backtrack import RecursiveBacktrackImpl
from maze_stepper.core.analysis import MazeAnalyzer
from maze_stepper.core.flags import CellFlag
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.index import Cardinal, Index2D


class TestAnalysis(unittest.TestCase):
    def test_fresh_grid(self):
        maze = Maze2D(3, 3)
        self.assertEqual(MazeAnalyzer.count_carved_edges(maze), 0)
        self.assertEqual(MazeAnalyzer.reachable_count(maze), 1)
        self.assertTrue(MazeAnalyzer.is_symmetric(maze))
        self.assertFalse(MazeAnalyzer.is_perfect(maze))
        self.assertTrue(MazeAnalyzer.is_perfect(Maze2D(1, 1)))
        self.assertEqual(MazeAnalyzer.calculate_stats(maze)["isolated"], 9)

    def test_cycle_is_not_perfect(self):
        maze = Maze2D(2, 2)
        maze.make_path((0, 0), Cardinal.EAST)
        maze.make_path((0, 1), Cardinal.SOUTH)
        maze.make_path((1, 1), Cardinal.WEST)
        self.assertTrue(MazeAnalyzer.is_perfect(maze))
        maze.make_path((1, 0), Cardinal.NORTH)
        self.assertEqual(MazeAnalyzer.count_carved_edges(maze), 4)
        self.assertFalse(MazeAnalyzer.is_perfect(maze))

    def test_asymmetric_paths(self):
        maze = Maze2D(2, 2)
        maze.set_flags((0, 0), CellFlag.PATH_EAST)
        maze.set_flags((1, 1), CellFlag.PATH_SOUTH)
        broken = MazeAnalyzer.asymmetric_paths(maze)
        self.assertIn((Index2D(0, 0), Cardinal.EAST), broken)
        self.assertIn((Index2D(1, 1), Cardinal.SOUTH), broken)
        self.assertEqual(len(broken), 2)
        self.assertFalse(MazeAnalyzer.is_symmetric(maze))

    def test_stats(self):
        w, h = 20, 20
        maze = Maze2D(h, w)
        RecursiveBacktrackImpl(random.Random(42)).run_all(maze)
        stats = MazeAnalyzer.calculate_stats(maze)
        self.assertEqual(stats["cells"], w * h)
        self.assertEqual(stats["carved_edges"], w * h - 1)
        self.assertEqual(stats["isolated"], 0)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], w * h)

    def test_stats_corridor(self):
        maze = Maze2D(1, 4)
        for col in range(3):
            maze.make_path((0, col), Cardinal.EAST)
        stats = MazeAnalyzer.calculate_stats(maze)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 2)
        self.assertEqual(stats["junctions"], 0)
        self.assertEqual(stats["dead_end_percent"], 50.0)


if __name__ == '__main__':
    unittest.main()
