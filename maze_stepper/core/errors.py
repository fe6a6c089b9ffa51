class MazeError(Exception):
    """Base class for every error raised by the maze engine."""


class IndexOutOfBounds(MazeError, IndexError):
    pass


class InvalidDimension(MazeError, ValueError):
    pass


class InvalidAdjacency(MazeError, ValueError):
    pass


class InvalidFlagIndex(MazeError, IndexError):
    pass


class NoValidNeighbor(MazeError, LookupError):
    pass
