import random
from typing import Callable, Dict, List

from maze_stepper.algo.backtrack import RecursiveBacktrackImpl
from maze_stepper.algo.base import MazeGenerator
from maze_stepper.algo.baseline import PathSingleDirection, RandomMazeImpl
from maze_stepper.algo.hunt_and_kill import RandomHuntAndKillImpl, StandardHuntAndKill

GeneratorFactory = Callable[[random.Random], MazeGenerator]

# Insertion order is the cycling order used by the driver
GENERATORS: Dict[str, GeneratorFactory] = {
    "backtrack": RecursiveBacktrackImpl,
    "hunt-random": RandomHuntAndKillImpl,
    "hunt-standard": StandardHuntAndKill,
    "single": PathSingleDirection,
    "random": RandomMazeImpl,
}


def generator_names() -> List[str]:
    return list(GENERATORS)


def create_generator(name: str, rng: random.Random = None) -> MazeGenerator:
    try:
        factory = GENERATORS[name]
    except KeyError:
        raise KeyError(f"Unknown generator {name!r}, choose from {generator_names()}") from None
    return factory(rng)
