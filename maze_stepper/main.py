import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_stepper' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.core.config import DEFAULT_DIMENSION, MAX_DIMENSION, validate_dimensions
from maze_stepper.core.errors import InvalidDimension


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Stepper: animated DFS maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--rows", type=str, default=None, help=f"Maze rows (1-{MAX_DIMENSION})")
    gen_parser.add_argument("--cols", type=str, default=None, help=f"Maze columns (1-{MAX_DIMENSION})")
    gen_parser.add_argument("--size", type=str, default=None,
                            help=f"Square shorthand for rows and columns (default {DEFAULT_DIMENSION})")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Animate generation in a window")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")
    gen_parser.add_argument("--replay", action="store_true",
                            help="Generate headless, then animate the recorded steps")
    gen_parser.add_argument("--fps", type=int, default=60, help="Frames per second when animating")
    gen_parser.add_argument("--steps-per-frame", type=int, default=1, help="Generator steps per frame")
    gen_parser.add_argument("--ascii", action="store_true", help="Print the finished maze as text")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")
    return parser


def resolve_dimensions(args):
    """--rows/--cols win over --size, which defaults to the square DEFAULT_DIMENSION."""
    size = args.size if args.size is not None else str(DEFAULT_DIMENSION)
    rows = args.rows if args.rows is not None else size
    cols = args.cols if args.cols is not None else size
    return validate_dimensions(rows, cols)


def animate(grid, generator, args, prefix, logger):
    logger.info("Visual mode enabled - Opening window...")
    from maze_stepper.viz.renderer import Renderer
    renderer = Renderer(grid, generator=generator, fps=args.fps,
                        steps_per_frame=args.steps_per_frame,
                        record=args.record, close_when_done=args.record,
                        record_prefix=prefix)
    if args.record:
        logger.info(f"Recording video to {renderer.recorder.output_file}")

    renderer.init_window()
    renderer.run_loop()

    if not generator.done:
        logger.info("Window closed before generation finished.")


def generate(args, logger) -> int:
    try:
        rows, cols = resolve_dimensions(args)
    except InvalidDimension as e:
        logger.error(f"Invalid maze size: {e}")
        return 2

    logger.info(f"Generating {rows}x{cols} maze with DFS (seed={args.seed})...")

    from maze_stepper.core.grid import setup
    from maze_stepper.core.events import EventLog
    from maze_stepper.algo.dfs import RecursiveBacktracker

    grid = setup(rows, cols, max_dimension=MAX_DIMENSION)
    log = EventLog(rows, cols) if args.replay else None
    generator = RecursiveBacktracker(grid, seed=args.seed, event_log=log)

    if args.replay:
        # Generate headless, then animate the recorded steps on a fresh grid
        steps = generator.run_all()
        logger.info(f"Recorded {steps} steps: {log.counts()}")

        from maze_stepper.viz.replay import ReplayGenerator
        replay = ReplayGenerator(setup(rows, cols, max_dimension=MAX_DIMENSION), log)
        animate(replay.grid, replay, args, f"replay_dfs_{rows}x{cols}", logger)
    elif args.visual or args.record:
        animate(grid, generator, args, f"gen_dfs_{rows}x{cols}", logger)
    else:
        logger.info("Headless generation...")
        steps = generator.run_all()
        logger.info(f"Done in {steps} steps ({generator.advances} advances, {generator.backtracks} backtracks).")

    if args.stats:
        from maze_stepper.core.analysis import MazeAnalyzer
        stats = MazeAnalyzer.calculate_stats(grid)
        logger.info(f"Stats: {stats}")

    if args.ascii:
        from maze_stepper.viz.text import render_ascii
        print(render_ascii(grid))

    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_stepper")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        return generate(args, logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
