from collections import deque
from typing import Dict, List, Tuple

import numpy as np

from maze_stepper.core.flags import PATH_FLAGS, CellFlag, path_flag
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.index import Cardinal, Index2D


class MazeAnalyzer:
    """Read-only topology queries over a Maze2D."""

    @staticmethod
    def count_carved_edges(maze: Maze2D) -> int:
        # Every edge is seen once from its western or northern endpoint
        cells = maze.to_numpy()
        east = np.count_nonzero(cells & int(CellFlag.PATH_EAST))
        south = np.count_nonzero(cells & int(CellFlag.PATH_SOUTH))
        return int(east + south)

    @staticmethod
    def asymmetric_paths(maze: Maze2D) -> List[Tuple[Index2D, Cardinal]]:
        """(pos, dir) pairs whose PATH flag has no matching reverse flag on the neighbour."""
        broken = []
        for pos, cell in maze:
            for direction in Cardinal:
                if not cell & path_flag(direction):
                    continue
                neighbour = pos + direction.offset
                if not maze.is_inbounds(neighbour):
                    broken.append((pos, direction))
                elif not maze.get_cell(neighbour) & path_flag(direction.reverse):
                    broken.append((pos, direction))
        return broken

    @staticmethod
    def is_symmetric(maze: Maze2D) -> bool:
        return not MazeAnalyzer.asymmetric_paths(maze)

    @staticmethod
    def reachable_count(maze: Maze2D, start: Tuple[int, int] = (0, 0)) -> int:
        """Flood fill over carved paths."""
        start = Index2D(*start)
        maze.get_index(start)
        seen = {start}
        queue = deque([start])
        while queue:
            pos = queue.popleft()
            cell = maze.get_cell(pos)
            for direction in Cardinal:
                if not cell & path_flag(direction):
                    continue
                neighbour = pos + direction.offset
                if neighbour not in seen and maze.is_inbounds(neighbour):
                    seen.add(neighbour)
                    queue.append(neighbour)
        return len(seen)

    @staticmethod
    def is_perfect(maze: Maze2D) -> bool:
        """Spanning tree check: symmetric, cells - 1 edges and fully connected."""
        if MazeAnalyzer.count_carved_edges(maze) != maze.cell_count - 1:
            return False
        if not MazeAnalyzer.is_symmetric(maze):
            return False
        return MazeAnalyzer.reachable_count(maze) == maze.cell_count

    @staticmethod
    def calculate_stats(maze: Maze2D) -> Dict[str, float]:
        cells = maze.to_numpy()
        exits = np.zeros(cells.shape, dtype=np.int32)
        for direction in Cardinal:
            exits += (cells & int(path_flag(direction))) != 0

        total = maze.cell_count
        dead_ends = int(np.count_nonzero(exits == 1))
        return {
            "cells": total,
            "carved_edges": MazeAnalyzer.count_carved_edges(maze),
            "dead_ends": dead_ends,
            "corridors": int(np.count_nonzero(exits == 2)),
            "junctions": int(np.count_nonzero(exits >= 3)),
            "isolated": int(np.count_nonzero((cells & int(PATH_FLAGS)) == 0)),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
        }
