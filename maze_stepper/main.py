import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_stepper' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.registry import GENERATORS, create_generator, generator_names
from maze_stepper.core.analysis import MazeAnalyzer
from maze_stepper.core.errors import MazeError
from maze_stepper.core.grid import Maze2D
from maze_stepper.core.rng import make_rng


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Stepper: steppable procedural maze generation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a maze headless and report its topology")
    gen_parser.add_argument("--rows", type=int, default=16, help="Maze rows")
    gen_parser.add_argument("--cols", type=int, default=16, help="Maze columns")
    gen_parser.add_argument("--algo", type=str, default="backtrack", choices=generator_names(), help="Generation algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    gen_parser.add_argument("--steps-per-update", type=int, default=100, help="Steps between progress reports")

    subparsers.add_parser("list", help="List available generators")
    return parser


def generate(args, logger: logging.Logger) -> int:
    try:
        maze = Maze2D(args.rows, args.cols)
    except MazeError as e:
        logger.error(str(e))
        return 2

    generator = create_generator(args.algo, make_rng(args.seed))
    logger.info(f"Generating {args.rows}x{args.cols} maze with {generator.display_name}...")

    t0 = time.time()
    for status in generator.run(maze, report_every=max(1, args.steps_per_update)):
        logger.debug(status)
    logger.info(f"Generation complete in {time.time() - t0:.4f}s ({generator.step_count} steps)")

    stats = MazeAnalyzer.calculate_stats(maze)
    logger.info(f"Stats: {stats}")
    print(f"Perfect maze: {MazeAnalyzer.is_perfect(maze)}")
    print(f"Walls (unique): {sum(1 for _ in maze.iter_walls_unique())} / {maze.get_total_wall_count()}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_stepper")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        return generate(args, logger)

    if args.command == "list":
        for name, factory in GENERATORS.items():
            print(f"{name:<15} {factory.display_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
