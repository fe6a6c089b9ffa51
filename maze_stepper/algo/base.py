import logging
import random
from abc import ABC, abstractmethod
from typing import Iterator

from maze_stepper.core.flags import TERMINAL_FLAGS
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.rng import make_rng

logger = logging.getLogger(__name__)


class MazeGenerator(ABC):
    """
    Incrementally steppable maze generator.

    Uninitialised -> initialised -> stepping -> complete. A generator owns its
    frontier state and random stream; the maze it is stepped over must not be
    written by anyone else until it completes.
    """

    display_name = "Generator"

    def __init__(self, rng: random.Random = None):
        self.rng = rng if rng is not None else make_rng()
        self.step_count = 0
        self._is_init = False
        self._is_complete = False

    @property
    def is_init(self) -> bool:
        return self._is_init

    def init(self, maze: Maze2D):
        logger.debug(f"{self.display_name}: init on {maze!r}")
        self._init(maze)
        self._is_init = True

    def init_once(self, maze: Maze2D):
        if not self._is_init:
            self.init(maze)

    def is_complete(self) -> bool:
        return self._is_complete

    def step(self, maze: Maze2D, count: int = 1):
        """Advance `count` single steps; each one is a no-op once complete."""
        self.init_once(maze)
        for _ in range(count):
            if self._is_complete:
                continue
            self._step(maze)
            self.step_count += 1

    @abstractmethod
    def _init(self, maze: Maze2D):
        pass

    @abstractmethod
    def _step(self, maze: Maze2D):
        """One unit of algorithmic work. Only called while incomplete."""
        pass

    def _finish(self, maze: Maze2D, terminal_pass: bool = True):
        self._is_complete = True
        if terminal_pass:
            finished = int(TERMINAL_FLAGS)
            maze.for_each_cell(lambda _, cell: cell | finished)
        logger.info(f"{self.display_name}: complete after {self.step_count + 1} steps")

    def run(self, maze: Maze2D, report_every: int = 100) -> Iterator[str]:
        """
        Steps to completion, yielding a status string every `report_every`
        steps so a caller can refresh between batches.
        """
        report_every = max(1, report_every)
        self.init_once(maze)
        while not self._is_complete:
            self.step(maze)
            if self.step_count % report_every == 0:
                yield f"{self.display_name}... Steps: {self.step_count}"
        yield "Done"

    def run_all(self, maze: Maze2D):
        """Helper to run the generator to completion."""
        for _ in self.run(maze):
            pass
