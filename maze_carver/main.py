import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver import config

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser():
    parser = argparse.ArgumentParser(description="Maze Carver: perfect maze generator with built-in solution")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate and print a new maze")
    gen_parser.add_argument("--width", type=int, default=config.DEFAULT_WIDTH, help="Maze width in cells")
    gen_parser.add_argument("--height", type=int, default=config.DEFAULT_HEIGHT, help="Maze height in cells")
    gen_parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED, help="Random Seed")
    gen_parser.add_argument("--debug", action="store_true", help="Print the grid after every carving step")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")
    gen_parser.add_argument("--visual", action="store_true", help="Watch generation in a pygame window")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")
    gen_parser.add_argument("--steps-per-frame", type=int, default=config.STEPS_PER_FRAME, help="Carving steps per rendered frame")

    # Demo Command
    subparsers.add_parser("demo", help="Print the showcase mazes (5x5 traced, 5x5, 10x15, 30x20)")

    return parser

def make_generator(width, height, seed=None, trace=False, stream=None):
    """Fresh grid and carver; with trace set, every step is printed."""
    from maze_carver.core.grid import Grid
    from maze_carver.algo.dfs import RecursiveBacktracker
    from maze_carver.viz.text import ConsoleTracer

    grid = Grid(width, height)
    tracer = ConsoleTracer(grid, stream) if trace else None
    return RecursiveBacktracker(grid, seed=seed, on_step=tracer)

def generate(width, height, seed=None, trace=False, stream=None):
    """Builds one maze to completion. Returns the generator."""
    generator = make_generator(width, height, seed=seed, trace=trace, stream=stream)
    generator.run_all()
    return generator

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    from maze_carver.viz.text import display

    if args.command == "generate":
        logger.info(f"Generating {args.width}x{args.height} maze (seed={args.seed})...")

        if args.visual or args.record:
            from maze_carver.viz.renderer import Renderer

            try:
                generator = make_generator(args.width, args.height, seed=args.seed, trace=args.debug)
            except ValueError as e:
                parser.error(str(e))
            logger.info("Visual mode enabled - Opening window...")
            renderer = Renderer(generator.grid, generator=generator, record=args.record,
                                steps_per_frame=args.steps_per_frame)

            # Auto-Name Recording
            if args.record:
                import datetime
                os.makedirs(config.RECORDINGS_DIR, exist_ok=True)
                ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
                fname = f"carve_{args.width}x{args.height}_{ts}.mp4"
                renderer.recorder.output_file = os.path.join(config.RECORDINGS_DIR, fname)
                logger.info(f"Recording video to {renderer.recorder.output_file}")

            renderer.init_window()
            renderer.run_loop()

            # Window may close before the last step
            if not generator.finished:
                logger.info("Finishing generation headless...")
                renderer.finish()
        else:
            try:
                generator = generate(args.width, args.height, seed=args.seed, trace=args.debug)
            except ValueError as e:
                parser.error(str(e))

        display(generator.grid)
        logger.info(f"Solution length: {len(generator.solution_path)} cells")

        if args.stats:
            from maze_carver.core.complexity import MazePostProcessor
            stats = MazePostProcessor.calculate_stats(generator.grid, generator.solution_path)
            logger.info(f"Stats: {stats}")

    elif args.command == "demo":
        for width, height, trace in config.DEMO_MAZES:
            logger.info(f"Demo maze {width}x{height} (trace={trace})")
            generator = generate(width, height, trace=trace)
            display(generator.grid)

if __name__ == "__main__":
    main()
