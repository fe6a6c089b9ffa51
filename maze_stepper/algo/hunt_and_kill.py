import random
from collections import deque
from typing import Callable, Deque, NamedTuple

from maze_stepper.algo.base import MazeGenerator
from maze_stepper.core.flags import COLOUR_FLAGS, CellFlag, is_set, is_unset
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.index import Index2D, row_major, serpentine


class HuntOrdering(NamedTuple):
    """
    Order in which the hunt phase scans for unvisited cells.
    populate builds the scan queue, starting_cell picks where the first walk begins.
    """
    populate: Callable[[Maze2D, random.Random], Deque[Index2D]]
    starting_cell: Callable[[Deque[Index2D], random.Random], Index2D]


def _populate_random(maze: Maze2D, rng: random.Random) -> Deque[Index2D]:
    cells = list(row_major(maze.bounds))
    rng.shuffle(cells)
    return deque(cells)


def _start_random(queue: Deque[Index2D], rng: random.Random) -> Index2D:
    return queue[rng.randrange(len(queue))]


def _populate_serpentine(maze: Maze2D, rng: random.Random) -> Deque[Index2D]:
    return deque(serpentine(maze.bounds))


def _start_first(queue: Deque[Index2D], rng: random.Random) -> Index2D:
    return queue[0]


RANDOM_ORDERING = HuntOrdering(_populate_random, _start_random)
SERPENTINE_ORDERING = HuntOrdering(_populate_serpentine, _start_first)


def _unvisited(cell: int) -> bool:
    return is_unset(cell, CellFlag.INVALID) and is_unset(cell, CellFlag.VISITED)


def _visited(cell: int) -> bool:
    return is_unset(cell, CellFlag.INVALID) and is_set(cell, CellFlag.VISITED)


class HuntAndKill(MazeGenerator):
    """
    Alternates a random walk from `current` with a hunt over a rotating queue
    of cells. The hunt carves from the visited region into the first unvisited
    cell that touches it, then walks again from there.

    Generation stops once `failed_attempts` consecutive hunt pops reach
    rows * cols without a hit.
    """

    display_name = "Hunt and Kill"

    def __init__(self, ordering: HuntOrdering, rng: random.Random = None):
        super().__init__(rng)
        self.ordering = ordering
        self.queue: Deque[Index2D] = deque()
        self.current = Index2D(0, 0)
        self.is_random_walk = True
        self.failed_attempts = 0

    def _init(self, maze: Maze2D):
        self.queue = self.ordering.populate(maze, self.rng)
        self.current = self.ordering.starting_cell(self.queue, self.rng)
        self.is_random_walk = True
        self.failed_attempts = 0
        maze.set_flags(self.current, CellFlag.VISITED, CellFlag.RED)

    def _step(self, maze: Maze2D):
        if self.is_random_walk:
            self._walk(maze)
        else:
            self._hunt(maze)

    def _walk(self, maze: Maze2D):
        adjacent = maze.get_adjacent(self.current)
        if adjacent.count_where(_unvisited) == 0:
            maze.unset_flags(self.current, CellFlag.RED)
            self.is_random_walk = False
            return

        direction, _ = adjacent.get_random_where(self.rng, _unvisited)
        target = self.current + direction.offset
        maze.make_path(self.current, direction)
        for pos in (self.current, target):
            maze.unset_flags(pos, COLOUR_FLAGS)
            maze.set_flags(pos, CellFlag.VISITED)
        maze.set_flags(target, CellFlag.RED)
        self.current = target

    def _hunt(self, maze: Maze2D):
        if not self.queue:
            self._finish(maze)
            return

        pos = self.queue.pop()
        cell = maze.get_cell(pos)
        adjacent = maze.get_adjacent(pos)

        if is_unset(cell, CellFlag.VISITED) and adjacent.count_where(_visited) > 0:
            direction, _ = adjacent.get_random_where(self.rng, _visited)
            maze.make_path(pos, direction)
            maze.unset_flags(pos, CellFlag.PROCESSED, COLOUR_FLAGS)
            maze.set_flags(pos, CellFlag.VISITED, CellFlag.RED)
            self.failed_attempts = 0
            self.current = pos
            self.is_random_walk = True
            return

        maze.set_flags(pos, CellFlag.PROCESSED, CellFlag.BLUE)
        self.queue.appendleft(pos)
        self.failed_attempts += 1
        if self.failed_attempts >= maze.cell_count:
            self._finish(maze)


class RandomHuntAndKillImpl(HuntAndKill):
    display_name = "Hunt and Kill (Random)"

    def __init__(self, rng: random.Random = None):
        super().__init__(RANDOM_ORDERING, rng)


class StandardHuntAndKill(HuntAndKill):
    display_name = "Hunt and Kill (Serpentine)"

    def __init__(self, rng: random.Random = None):
        super().__init__(SERPENTINE_ORDERING, rng)
