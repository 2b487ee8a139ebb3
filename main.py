#!/usr/bin/env python3
"""
Terminal Minesweeper - Main entry point.

Usage:
    python main.py [--seed N] [--log-file PATH]

Controls:
    w/a/s/d or arrow keys  move
    space                  reveal
    q                      quit (confirm with y)
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent / "src"))

from controller import GameController  # noqa: E402
from game import DEFAULT_CONFIG  # noqa: E402
from terminal import TerminalDriver, TerminalError  # noqa: E402

logger = logging.getLogger(__name__)


def setup_logging(log_file: Optional[str]) -> None:
    """Send debug logs to a file; stay silent on the terminal otherwise."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def play(seed: Optional[int]) -> int:
    """Run one game and return the process exit code."""
    try:
        with TerminalDriver() as driver:
            controller = GameController(driver, DEFAULT_CONFIG, seed=seed)
            controller.run()
    except TerminalError as exc:
        logger.error("Terminal failure: %s", exc)
        print(f"minesweeper: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, terminal restored")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and play a game."""
    parser = argparse.ArgumentParser(
        description="Minesweeper in the terminal"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--log-file", default=None, help="Write debug logs to this file"
    )
    args = parser.parse_args(argv)

    setup_logging(args.log_file)
    logger.info("Starting with seed=%s", args.seed)
    return play(args.seed)


if __name__ == "__main__":
    sys.exit(main())
