import random
from typing import Callable, Iterator, List, Tuple

from maze_stepper.core.errors import NoValidNeighbor
from maze_stepper.core.flags import CellFlag, describe, is_set
from maze_stepper.core.index import Cardinal, Index2D

# Out-of-grid neighbours are reported with this value instead of being omitted
INVALID_CELL = int(CellFlag.INVALID)

CellPredicate = Callable[[int], bool]
SlotPredicate = Callable[[Cardinal, int], bool]


class AdjacentCells:
    """
    Snapshot of the four cardinal neighbours of a grid position.
    Slots are ordered NORTH, EAST, SOUTH, WEST and always present; a slot
    outside the grid holds INVALID_CELL so predicates never need a bounds check.
    """

    __slots__ = ('origin', 'slots')

    def __init__(self, origin: Index2D, slots: List[Tuple[Cardinal, int]]):
        self.origin = origin
        self.slots = slots

    @classmethod
    def of(cls, maze, pos) -> "AdjacentCells":
        origin = Index2D(*pos)
        slots = []
        for direction in Cardinal:
            neighbour = origin + direction.offset
            if maze.is_inbounds(neighbour):
                slots.append((direction, maze.get_cell(neighbour)))
            else:
                slots.append((direction, INVALID_CELL))
        return cls(origin, slots)

    def __getitem__(self, direction: Cardinal) -> int:
        return self.slots[direction][1]

    def __iter__(self) -> Iterator[Tuple[Cardinal, int]]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def position_of(self, direction: Cardinal) -> Index2D:
        return self.origin + direction.offset

    def valid_count(self) -> int:
        return self.count_where(lambda cell: not is_set(cell, CellFlag.INVALID))

    def count_where(self, predicate: CellPredicate) -> int:
        return sum(1 for _, cell in self.slots if predicate(cell))

    def count_where_alt(self, predicate: SlotPredicate) -> int:
        return sum(1 for direction, cell in self.slots if predicate(direction, cell))

    def get_random_where(self, rng: random.Random, predicate: CellPredicate) -> Tuple[Cardinal, int]:
        return self.get_random_where_alt(rng, lambda _, cell: predicate(cell))

    def get_random_where_alt(self, rng: random.Random, predicate: SlotPredicate) -> Tuple[Cardinal, int]:
        """
        Uniformly pick one slot satisfying the predicate.
        The cardinal order is shuffled before the scan so the first match is not
        biased towards NORTH.
        """
        if self.count_where_alt(predicate) == 0:
            raise NoValidNeighbor(f"No neighbour of {tuple(self.origin)} matches the predicate ({self.describe()})")

        order = list(Cardinal)
        rng.shuffle(order)
        for direction in order:
            cell = self.slots[direction][1]
            if predicate(direction, cell):
                return direction, cell

        # count_where_alt guarantees a match above
        raise NoValidNeighbor(f"No neighbour of {tuple(self.origin)} matches the predicate")

    def describe(self) -> str:
        return ", ".join(f"{d.name}={describe(cell)}" for d, cell in self.slots)

    def __repr__(self) -> str:
        cells = ", ".join(f"{d.name}={cell:#x}" for d, cell in self.slots)
        return f"AdjacentCells({tuple(self.origin)}: {cells})"
