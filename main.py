#!/usr/bin/env python3
"""
hypermaze - Command-line entry point

Generates a level from dimension lengths and a seed, logs its statistics,
and optionally validates it and dumps the maze graph for inspection.
"""

import argparse
import logging
import sys
from pathlib import Path

from hypermaze.pipeline import (
    DEFAULT_SEED,
    LevelLoader,
    LevelLoadError,
    LevelSettings,
    load_settings,
    save_settings,
)
from hypermaze.pipeline.debug import export_maze_dot, export_maze_json

logger = logging.getLogger("hypermaze")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an N-dimensional spanning-tree maze."
    )
    parser.add_argument(
        "--lengths", type=int, nargs="+", default=[4, 15, 2],
        help="Side length of each dimension (default: 4 15 2)"
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help=f"Generation seed (default: {DEFAULT_SEED})"
    )
    parser.add_argument(
        "--random-seed", action="store_true",
        help="Ignore --seed and draw a random one"
    )
    parser.add_argument("--validate", action="store_true", help="Run the structural validation gate")
    parser.add_argument("--strict", action="store_true", help="Treat validation warnings as failures")
    parser.add_argument(
        "--dump", choices=["dot", "json"],
        help="Write the maze graph in the given format"
    )
    parser.add_argument("--output", type=Path, help="File for --dump (default: stdout)")
    parser.add_argument("--name", default="level", help="Level name for --save/--load")
    parser.add_argument("--save", action="store_true", help="Save these settings under --name")
    parser.add_argument("--load", action="store_true", help="Load saved settings named --name")
    parser.add_argument(
        "--levels-dir", type=Path,
        help="Directory for saved settings (default: ~/.config/hypermaze/levels)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if args.load:
        settings = load_settings(args.name, args.levels_dir)
        if settings is None:
            logger.error("No saved settings named '%s'", args.name)
            return 1
        settings.validate = settings.validate or args.validate
        settings.strict_validation = settings.strict_validation or args.strict
    else:
        settings = LevelSettings(
            lengths=tuple(args.lengths),
            seed=None if args.random_seed else args.seed,
            validate=args.validate,
            strict_validation=args.strict,
            name=args.name,
        )

    try:
        result = LevelLoader(settings).load()
    except LevelLoadError as e:
        logger.error("%s", e)
        return 1

    for warning in result.warnings:
        logger.warning(warning)
    if not result.success:
        for error in result.errors:
            logger.error(error)
        return 1

    if args.save:
        path = save_settings(settings, args.levels_dir)
        logger.info("Settings saved to %s", path)

    level = result.level
    logger.info(
        "Maze %s: %d cells, %d passages, seed %d",
        "x".join(str(n) for n in level.dims_limit()),
        level.maze.cell_count, level.maze.edge_count, result.seed
    )
    walls = sum(1 for wall in level.iter_walls() if not wall.is_border)
    logger.info("Visible plane %s holds %d interior walls", level.axis, walls)

    if args.dump:
        if args.dump == "dot":
            text = export_maze_dot(level.maze)
        else:
            text = export_maze_json(level.maze, result.seed)
        if args.output:
            args.output.write_text(text + "\n", encoding="utf-8")
            logger.info("Maze graph written: %s", args.output)
        else:
            print(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
