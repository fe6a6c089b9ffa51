"""Steppable procedural maze generation over a bit-flag grid."""

from maze_stepper.core.errors import (
    IndexOutOfBounds,
    InvalidAdjacency,
    InvalidDimension,
    InvalidFlagIndex,
    MazeError,
    NoValidNeighbor,
)
from maze_stepper.core.flags import CellFlag
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.index import Cardinal, Index2D
from maze_stepper.algo.registry import create_generator, generator_names

__version__ = "0.1.0"
