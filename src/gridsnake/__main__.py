from __future__ import annotations

import argparse
import logging
import random

from . import config
from .game import run
from .logic import MIN_SIZE
from .state import State


def final_message(state: State) -> str:
    if state.game_over:
        return f"Game Over! Score: {state.score}"
    return f"Score: {state.score}"


def _board_size(value: str) -> int:
    size = int(value)
    if size < MIN_SIZE:
        raise argparse.ArgumentTypeError(f"board size must be at least {MIN_SIZE}")
    return size


def _positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return n


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake, played with the keyboard.")
    parser.add_argument("--size", type=_board_size, default=config.DEFAULT_SIZE, help="Board is SIZE x SIZE cells.")
    parser.add_argument("--tick-ms", type=_positive_int, default=config.TICK_MS, help="Milliseconds per tick.")
    parser.add_argument("--block", type=_positive_int, default=config.BLOCK, help="Cell size in pixels.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement (replayable games).")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    rng = random.Random(args.seed).random
    state = run(args.size, rng, tick_ms=args.tick_ms, block=args.block)
    print(final_message(state))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
