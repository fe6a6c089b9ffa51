import logging
from array import array
from typing import Callable, Iterator, Optional, Tuple, Union

import numpy as np

from maze_stepper.core.adjacency import AdjacentCells
from maze_stepper.core.errors import IndexOutOfBounds, InvalidDimension
from maze_stepper.core.flags import CellFlag, cellof, path_flag
from maze_stepper.core.index import Cardinal, Index2D, row_major

logger = logging.getLogger(__name__)

EMPTY = int(CellFlag.EMPTY_PATH)

Position = Union[Index2D, Tuple[int, int]]
CellVisitor = Callable[[Index2D, int], Optional[int]]
WallVisitor = Callable[[Index2D, Cardinal, int], None]


class Maze2D:
    """
    Flat row-major grid of bit-packed cells.

    Every cell starts as EMPTY_PATH. Topology only ever changes through
    make_path, which keeps PATH_* flags symmetric between neighbours.
    """

    # 'H' (unsigned short) -> 2 bytes per cell, enough for all 13 flags
    TYPECODE = 'H'

    __slots__ = ('bounds', 'cells')

    def __init__(self, rows: int, cols: int):
        self.bounds = Index2D(0, 0)
        self.cells = array(self.TYPECODE)
        self.resize(rows, cols)

    @property
    def rows(self) -> int:
        return self.bounds.row

    @property
    def cols(self) -> int:
        return self.bounds.col

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def get_total_wall_count(self) -> int:
        # 4 faces per cell, minus the face shared with each already counted neighbour
        return self.rows * self.cols * 2 + self.rows + self.cols

    # Lifecycle

    def reset(self):
        self.cells = array(self.TYPECODE, [EMPTY]) * self.cell_count

    def resize(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise InvalidDimension(f"Maze dimensions must be positive, got {rows}x{cols}")
        self.bounds = Index2D(rows, cols)
        self.cells = array(self.TYPECODE, [EMPTY]) * (rows * cols)
        logger.debug(f"Maze2D resized to {rows}x{cols} ({rows * cols} cells)")

    # Cell access

    def is_inbounds(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.bounds.row and 0 <= pos[1] < self.bounds.col

    def get_index(self, pos: Position) -> int:
        row, col = pos
        if 0 <= row < self.bounds.row and 0 <= col < self.bounds.col:
            return row * self.bounds.col + col
        raise IndexOutOfBounds(f"Position ({row}, {col}) out of bounds {tuple(self.bounds)}")

    def get_cell(self, pos: Position) -> int:
        return self.cells[self.get_index(pos)]

    def set_cell(self, pos: Position, cell: int):
        self.cells[self.get_index(pos)] = cell

    def set_flags(self, pos: Position, *flags: CellFlag):
        self.cells[self.get_index(pos)] |= cellof(*flags)

    def unset_flags(self, pos: Position, *flags: CellFlag):
        self.cells[self.get_index(pos)] &= ~cellof(*flags) & 0xFFFF

    def set_flags_adjacent(self, pos: Position, *flags: CellFlag):
        """Set flags on pos and each of its in-bounds cardinal neighbours."""
        self.set_flags(pos, *flags)
        for neighbour in self._neighbours(pos):
            self.set_flags(neighbour, *flags)

    def unset_flags_adjacent(self, pos: Position, *flags: CellFlag):
        self.unset_flags(pos, *flags)
        for neighbour in self._neighbours(pos):
            self.unset_flags(neighbour, *flags)

    def has_path(self, pos: Position, direction: Cardinal) -> bool:
        return (self.get_cell(pos) & path_flag(direction)) != 0

    def get_adjacent(self, pos: Position) -> AdjacentCells:
        return AdjacentCells.of(self, pos)

    def _neighbours(self, pos: Position) -> Iterator[Index2D]:
        origin = Index2D(*pos)
        for direction in Cardinal:
            neighbour = origin + direction.offset
            if self.is_inbounds(neighbour):
                yield neighbour

    # Carving

    def make_path(self, pos: Position, target: Union[Cardinal, Position]):
        """
        Removes the wall between pos and its neighbour.
        target is either the Cardinal towards the neighbour or the neighbour's
        position; a position must be exactly one cardinal step away.
        """
        origin = Index2D(*pos)
        if isinstance(target, Cardinal):
            direction = target
        else:
            direction = origin.direction_to(target)

        neighbour = origin + direction.offset
        idx1 = self.get_index(origin)
        idx2 = self.get_index(neighbour)

        self.cells[idx1] = (self.cells[idx1] & ~EMPTY) | int(path_flag(direction))
        self.cells[idx2] = (self.cells[idx2] & ~EMPTY) | int(path_flag(direction.reverse))

    # Iteration

    def __iter__(self) -> Iterator[Tuple[Index2D, int]]:
        for pos in row_major(self.bounds):
            yield pos, self.cells[pos.row * self.bounds.col + pos.col]

    def for_each_cell(self, fn: CellVisitor):
        """
        Calls fn(pos, cell) in row-major order.
        A non-None return value replaces the cell.
        """
        for pos, cell in self:
            result = fn(pos, cell)
            if result is not None:
                self.cells[pos.row * self.bounds.col + pos.col] = result

    def iter_walls(self) -> Iterator[Tuple[Index2D, Cardinal, int]]:
        for pos, cell in self:
            for direction in Cardinal:
                if not cell & path_flag(direction):
                    yield pos, direction, cell

    def iter_walls_unique(self) -> Iterator[Tuple[Index2D, Cardinal, int]]:
        # Interior NORTH/WEST walls are the SOUTH/EAST walls of the previous row/column
        for pos, cell in self:
            for direction in Cardinal:
                if direction == Cardinal.NORTH and pos.row != 0:
                    continue
                if direction == Cardinal.WEST and pos.col != 0:
                    continue
                if not cell & path_flag(direction):
                    yield pos, direction, cell

    def for_each_wall(self, fn: WallVisitor):
        for pos, direction, cell in self.iter_walls():
            fn(pos, direction, cell)

    def for_each_wall_unique(self, fn: WallVisitor):
        for pos, direction, cell in self.iter_walls_unique():
            fn(pos, direction, cell)

    def to_numpy(self) -> np.ndarray:
        """Read-only (rows, cols) copy of the cells for external consumers."""
        snapshot = np.frombuffer(self.cells.tobytes(), dtype=np.uint16).reshape(self.rows, self.cols)
        snapshot.flags.writeable = False
        return snapshot

    def __repr__(self) -> str:
        return f"Maze2D({self.rows}x{self.cols})"
