import sys
import os
import random
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.registry import create_generator
from maze_stepper.core.analysis import MazeAnalyzer
from maze_stepper.core.grid import Maze2D

ALGORITHMS = ["backtrack", "hunt-random", "hunt-standard"]


def benchmark_size(rows: int, cols: int):
    print(f"\n--- Benchmarking {rows}x{cols} ({rows * cols:,} cells) ---")

    start_time = time.time()
    maze = Maze2D(rows, cols)
    mem_kb = maze.cells.buffer_info()[1] * maze.cells.itemsize / 1024
    print(f"Grid Init: {time.time() - start_time:.4f}s")
    print(f"Memory (Grid Data): ~{mem_kb:.1f} KB")

    print(f"\n{'ALGORITHM':<15} | {'TIME (s)':<10} | {'STEPS':<10} | {'DEAD ENDS':<10} | {'PERFECT':<7}")
    print("-" * 65)

    for name in ALGORITHMS:
        maze.reset()
        generator = create_generator(name, random.Random(42))

        gen_start = time.time()
        generator.run_all(maze)
        duration = time.time() - gen_start

        stats = MazeAnalyzer.calculate_stats(maze)
        perfect = MazeAnalyzer.is_perfect(maze)
        print(f"{name:<15} | {duration:<10.4f} | {generator.step_count:<10} | {stats['dead_ends']:<10} | {perfect!s:<7}")


def run_suite():
    sizes = [
        (16, 16),
        (100, 100),
        (250, 250),
    ]

    for rows, cols in sizes:
        benchmark_size(rows, cols)


if __name__ == "__main__":
    run_suite()
