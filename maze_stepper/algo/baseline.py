import random

from maze_stepper.algo.base import MazeGenerator
from maze_stepper.core.flags import CellFlag, is_set
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.index import Cardinal, Index2D

_COLOURS = (CellFlag.RED, CellFlag.GREEN, CellFlag.BLUE)


class RandomMazeImpl(MazeGenerator):
    """
    Noise baseline: walks the grid in serpentine order, colouring each cell
    and carving a symmetric path to one random in-bounds neighbour. The
    result has real but arbitrary topology (loops, disconnected regions).
    """

    display_name = "Random Noise"

    def __init__(self, rng: random.Random = None):
        super().__init__(rng)
        self.index = Index2D(0, 0)

    def _init(self, maze: Maze2D):
        self.index = Index2D(0, 0)

    def _step(self, maze: Maze2D):
        pos = self.index
        colour = _COLOURS[self.rng.randrange(len(_COLOURS))]
        maze.unset_flags(pos, CellFlag.EMPTY_PATH)
        maze.set_flags(pos, colour, CellFlag.MODIFIED)

        adjacent = maze.get_adjacent(pos)
        if adjacent.valid_count() > 0:
            direction, _ = adjacent.get_random_where(self.rng, lambda cell: not is_set(cell, CellFlag.INVALID))
            maze.make_path(pos, direction)

        if pos.has_next(maze.bounds):
            self.index = pos.next(maze.bounds)
        else:
            self._finish(maze, terminal_pass=False)


class PathSingleDirection(MazeGenerator):
    """Carves every cell towards one fixed direction, giving straight corridors."""

    display_name = "Single Direction"

    def __init__(self, rng: random.Random = None, direction: Cardinal = Cardinal.EAST):
        super().__init__(rng)
        self.direction = direction
        self.index = 0

    def _init(self, maze: Maze2D):
        self.index = 0

    def _step(self, maze: Maze2D):
        pos = Index2D(*divmod(self.index, maze.cols))
        maze.set_flags(pos, CellFlag.VISITED)
        if maze.is_inbounds(pos + self.direction.offset):
            maze.make_path(pos, self.direction)

        self.index += 1
        if self.index >= maze.cell_count:
            self._finish(maze)
