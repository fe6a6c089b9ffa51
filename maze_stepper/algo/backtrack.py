import random
from typing import List

from maze_stepper.algo.base import MazeGenerator
from maze_stepper.core.flags import CellFlag, is_unset
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.index import Index2D


def _unvisited(cell: int) -> bool:
    return is_unset(cell, CellFlag.INVALID) and is_unset(cell, CellFlag.VISITED)


class RecursiveBacktrackImpl(MazeGenerator):
    """
    Randomised depth-first search over an explicit stack (no native recursion,
    grids can be far deeper than the interpreter's recursion limit).

    RED marks the head of the stack, GREEN the cells on the active branch.
    """

    display_name = "Recursive Backtracker"

    def __init__(self, rng: random.Random = None):
        super().__init__(rng)
        self.stack: List[Index2D] = []

    def _init(self, maze: Maze2D):
        start = Index2D(self.rng.randrange(maze.rows), self.rng.randrange(maze.cols))
        self.stack = [start]

    def _step(self, maze: Maze2D):
        if not self.stack:
            self._finish(maze)
            return

        pos = self.stack[-1]
        adjacent = maze.get_adjacent(pos)

        if adjacent.count_where(_unvisited) == 0:
            # Backtrack
            self.stack.pop()
            if self.stack:
                maze.unset_flags(pos, CellFlag.GREEN)
                top = self.stack[-1]
                maze.set_flags(top, CellFlag.RED)
                maze.unset_flags(top, CellFlag.GREEN)
            return

        direction, _ = adjacent.get_random_where(self.rng, _unvisited)
        neighbour = pos + direction.offset

        maze.unset_flags(pos, CellFlag.EMPTY_PATH, CellFlag.RED)
        maze.set_flags(pos, CellFlag.VISITED, CellFlag.GREEN)
        maze.set_flags(neighbour, CellFlag.VISITED, CellFlag.GREEN)
        maze.make_path(pos, direction)

        self.stack.append(neighbour)
