"""
main.py — Command line entry point for the pocket cube solver
==============================================================

Wires the pieces together: build a solved cube, scramble it (random
"monkey play" or an explicit move list), solve it with the breadth-first
solver, replay the solution and print every stage.

Features & behavior:
 - `--max-moves` bounds the random scramble length, `--seed` makes it
   reproducible, `--scramble "F D' L"` replaces it with a fixed sequence.
 - `--net` prints a compact per-side color grid instead of the slot dump.
 - Debug logging is explicitly opt-in (`--debug`).

------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from .config import LOG_FORMAT, SCRAMBLE_MAX_MOVES
from .cube_solver import search
from .cube_state import construct_solved, format_moves, parse_moves
from .render import format_net, format_state
from .scramble import scramble

logger = logging.getLogger("pocket_cube.main")


def create_arg_parser() -> argparse.ArgumentParser:
    """
    Build and return the CLI argument parser.
    """
    p = argparse.ArgumentParser(
        prog="pocket-cube",
        description="Scramble a 2x2x2 cube and solve it with a shortest move sequence.",
        allow_abbrev=False,
    )
    p.add_argument("--max-moves", type=int, default=SCRAMBLE_MAX_MOVES,
                   help="Upper bound (exclusive) of random scramble moves (default: %(default)s).")
    p.add_argument("--seed", type=int, default=None, help="Seed for the random scramble.")
    p.add_argument("--scramble", default=None,
                   help="Explicit scramble, e.g. \"F D' L\" (overrides the random one).")
    p.add_argument("--net", action="store_true", help="Print side grids instead of the slot dump.")
    p.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Supports direct CLI invocation or programmatic use via:
        main(["--seed", "7"])

    Returns integer exit code.
    """
    args = create_arg_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled.")

    show = format_net if args.net else format_state

    cube = construct_solved()
    print("Initial cube:")
    print(show(cube))
    print()

    if args.scramble is not None:
        try:
            moves = parse_moves(args.scramble)
        except ValueError as e:
            logger.error("Invalid scramble: %s", e)
            return 2
        cube = cube.apply_sequence(moves)
    else:
        if args.max_moves < 0:
            logger.error("--max-moves must be >= 0")
            return 2
        cube, moves = scramble(cube, args.max_moves, random.Random(args.seed))

    print("Jumbled up cube (%s):" % (format_moves(moves) or "no moves"))
    print(show(cube))
    print()

    result = search(cube)
    cube = cube.apply_sequence(result.moves)
    print("Solved cube:")
    print(show(cube))
    print()
    print("Moves to solve: %d" % len(result.moves))
    if result.moves:
        print("Solution: %s" % result.notation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
