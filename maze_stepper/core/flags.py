from enum import IntFlag
from functools import reduce
from operator import or_

from maze_stepper.core.errors import InvalidFlagIndex


class CellFlag(IntFlag):
    # Topology
    EMPTY_PATH = 1 << 0
    PATH_NORTH = 1 << 1
    PATH_EAST  = 1 << 2
    PATH_SOUTH = 1 << 3
    PATH_WEST  = 1 << 4

    # Presentation hints (no topological meaning)
    RED   = 1 << 5
    GREEN = 1 << 6
    BLUE  = 1 << 7

    # Traversal bookkeeping
    VISITED   = 1 << 8
    INVALID   = 1 << 9  # Sentinel for out-of-grid neighbours
    PROCESSED = 1 << 10
    MODIFIED  = 1 << 11
    FINISHED  = 1 << 12


FLAG_COUNT = 13

# Cardinal order: NORTH, EAST, SOUTH, WEST
PATH_BY_CARDINAL = (
    CellFlag.PATH_NORTH,
    CellFlag.PATH_EAST,
    CellFlag.PATH_SOUTH,
    CellFlag.PATH_WEST,
)

PATH_FLAGS = CellFlag.PATH_NORTH | CellFlag.PATH_EAST | CellFlag.PATH_SOUTH | CellFlag.PATH_WEST
COLOUR_FLAGS = CellFlag.RED | CellFlag.GREEN | CellFlag.BLUE
TERMINAL_FLAGS = COLOUR_FLAGS | CellFlag.FINISHED


def cellof(*flags: CellFlag) -> int:
    """Combine flags into a raw cell value. No flags gives 0."""
    return int(reduce(or_, flags, 0))


def is_set(cell: int, flag: CellFlag) -> bool:
    return (cell & flag) != 0


def is_unset(cell: int, flag: CellFlag) -> bool:
    return (cell & flag) == 0


def is_all_set(cell: int, *flags: CellFlag) -> bool:
    mask = cellof(*flags)
    return (cell & mask) == mask


def is_all_unset(cell: int, *flags: CellFlag) -> bool:
    return (cell & cellof(*flags)) == 0


def get_flag(index: int) -> CellFlag:
    if not 0 <= index < FLAG_COUNT:
        raise InvalidFlagIndex(f"Flag index {index} is outside [0, {FLAG_COUNT})")
    return CellFlag(1 << index)


def path_flag(direction) -> CellFlag:
    """PATH_* flag for a Cardinal (or its integer value)."""
    return PATH_BY_CARDINAL[int(direction)]


def describe(cell: int) -> str:
    names = [flag.name for flag in CellFlag if cell & flag]
    return "|".join(names) if names else "NONE"
