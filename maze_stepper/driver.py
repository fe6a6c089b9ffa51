import logging
import random
from typing import Callable, List, Sequence

from maze_stepper.algo.base import MazeGenerator
from maze_stepper.algo.registry import create_generator, generator_names
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.rng import make_rng

logger = logging.getLogger(__name__)


class GenerationDriver:
    """
    Frame-paced host loop helper. The caller owns the loop and calls
    update(delta) once per frame; the driver decides whether a batch of
    steps runs on that frame.
    """

    MIN_STEPS = 1
    MAX_STEPS = 1 << 16
    MIN_UPDATE_INTERVAL = 1.0 / 30.0

    def __init__(
        self,
        maze: Maze2D,
        names: Sequence[str] = None,
        steps_per_update: int = MIN_STEPS,
        paused: bool = True,
        rng_factory: Callable[[], random.Random] = make_rng,
    ):
        self.maze = maze
        self.names: List[str] = list(names) if names else generator_names()
        self.rng_factory = rng_factory
        self.steps_per_update = self._clamp(steps_per_update)
        self.is_paused = paused
        self.theta = 0.0
        self.current = 0
        self.generator = self._create()

    @property
    def name(self) -> str:
        return self.names[self.current]

    def _create(self) -> MazeGenerator:
        generator = create_generator(self.name, self.rng_factory())
        logger.info(f"Maze Generator: '{generator.display_name}'")
        return generator

    def _clamp(self, steps: int) -> int:
        return max(self.MIN_STEPS, min(self.MAX_STEPS, steps))

    def toggle_pause(self):
        self.is_paused = not self.is_paused

    def faster(self):
        self.steps_per_update = self._clamp(self.steps_per_update << 1)

    def slower(self):
        self.steps_per_update = self._clamp(self.steps_per_update >> 1)

    def next_generator(self):
        self.current = (self.current + 1) % len(self.names)
        self.maze.reset()
        self.is_paused = True
        self.generator = self._create()

    def restart(self):
        self.maze.reset()
        self.is_paused = True
        self.generator = self._create()
        self.generator.init(self.maze)

    def update(self, delta: float) -> bool:
        """Returns True when a batch of steps was run on this frame."""
        self.generator.init_once(self.maze)
        self.theta += delta

        if self.is_paused or self.generator.is_complete():
            return False
        if self.theta <= self.MIN_UPDATE_INTERVAL:
            return False

        self.generator.step(self.maze, self.steps_per_update)
        self.theta = 0.0
        return True
