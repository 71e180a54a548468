#!/usr/bin/env python3
"""
Shape Surface - Main Entry Point

A direct-manipulation editor for square and round shapes: create, select,
marquee-select, drag, resize, morph, nudge and delete.

Usage:
    python main.py
    python main.py --debug              # Enable debug logging
    python main.py --width 1600 --height 900 --seed 7
"""

import argparse
import logging

import config


def setup_logging(debug: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at {'DEBUG' if debug else 'INFO'} level")


def parse_args(argv=None) -> argparse.Namespace:
    width, height = config.DEFAULT_SURFACE_SIZE
    parser = argparse.ArgumentParser(description=config.WINDOW_TITLE)
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--width", type=int, default=width, help="Initial window width")
    parser.add_argument("--height", type=int, default=height, help="Initial window height")
    parser.add_argument("--seed", type=int, default=None, help="Seed for shape placement")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)

    # Imported late so argument errors surface without a display.
    from app import run_app

    run_app(surface_size=(args.width, args.height), seed=args.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
