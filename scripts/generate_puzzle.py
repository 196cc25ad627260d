"""Generate a puzzle from the command line and print it."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.solver.generator import generate_sudoku
from backend.solver.geometry import DIFFICULTIES, SUPPORTED_SIZES, get_grid_info
from backend.solver.labels import render_grid

LOGGER = logging.getLogger("generate_puzzle")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a Sudoku puzzle")
    parser.add_argument("--size", type=int, choices=SUPPORTED_SIZES, default=9)
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default="easy")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible puzzle",
    )
    parser.add_argument("--show-solution", action="store_true")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    _configure_logging(args.debug)

    rng = random.Random(args.seed) if args.seed is not None else None
    result = generate_sudoku(args.size, args.difficulty, rng=rng)
    info = get_grid_info(args.size)

    LOGGER.info(
        "size=%d difficulty=%s clues=%d unique_verified=%s",
        result.size,
        result.difficulty,
        result.clues,
        result.unique_verified,
    )
    print(render_grid(result.puzzle, info))

    if args.show_solution:
        print()
        print(render_grid(result.solution, info))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
