from enum import IntEnum
from typing import Iterator, NamedTuple

from maze_stepper.core.errors import IndexOutOfBounds, InvalidAdjacency


class Index2D(NamedTuple):
    row: int
    col: int

    def __add__(self, other) -> "Index2D":
        return Index2D(self.row + other[0], self.col + other[1])

    def __sub__(self, other) -> "Index2D":
        return Index2D(self.row - other[0], self.col - other[1])

    def __neg__(self) -> "Index2D":
        return Index2D(-self.row, -self.col)

    def is_inbounds(self, bounds) -> bool:
        return 0 <= self.row < bounds[0] and 0 <= self.col < bounds[1]

    def is_adjacent(self, other) -> bool:
        return abs(self.row - other[0]) + abs(self.col - other[1]) == 1

    def direction_to(self, other) -> "Cardinal":
        """Cardinal step leading from this position to an adjacent one."""
        if not self.is_adjacent(other):
            raise InvalidAdjacency(f"{tuple(self)} and {tuple(other)} are not cardinal neighbours")
        delta = Index2D(*other) - self
        for direction in Cardinal:
            if direction.offset == delta:
                return direction
        raise InvalidAdjacency(f"No cardinal for offset {tuple(delta)}")

    # Serpentine (boustrophedon) scan: even rows run west->east, odd rows east->west.

    def has_next(self, bounds) -> bool:
        rows, cols = bounds
        if self.row < rows - 1:
            return True
        if self.row % 2 == 0:
            return self.col < cols - 1
        return self.col > 0

    def next(self, bounds) -> "Index2D":
        rows, cols = bounds
        if self.row % 2 == 0:
            if self.col < cols - 1:
                return Index2D(self.row, self.col + 1)
        elif self.col > 0:
            return Index2D(self.row, self.col - 1)
        if self.row < rows - 1:
            return Index2D(self.row + 1, self.col)
        raise IndexOutOfBounds(f"{tuple(self)} is the last serpentine position in {tuple(bounds)}")


def serpentine(bounds) -> Iterator[Index2D]:
    pos = Index2D(0, 0)
    yield pos
    while pos.has_next(bounds):
        pos = pos.next(bounds)
        yield pos


def row_major(bounds) -> Iterator[Index2D]:
    rows, cols = bounds
    for r in range(rows):
        for c in range(cols):
            yield Index2D(r, c)


class Cardinal(IntEnum):
    NORTH = 0
    EAST  = 1
    SOUTH = 2
    WEST  = 3

    @property
    def offset(self) -> Index2D:
        return _OFFSETS[self]

    @property
    def reverse(self) -> "Cardinal":
        return Cardinal((self + 2) % 4)

    @staticmethod
    def from_index(index: int) -> "Cardinal":
        if not 0 <= index <= 3:
            raise ValueError(f"Cardinal index {index} is invalid")
        return Cardinal(index)

    def __str__(self) -> str:
        return self.name


_OFFSETS = {
    Cardinal.NORTH: Index2D(-1, 0),
    Cardinal.EAST: Index2D(0, 1),
    Cardinal.SOUTH: Index2D(1, 0),
    Cardinal.WEST: Index2D(0, -1),
}
