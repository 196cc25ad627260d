"""Benchmark puzzle generation runtime per size and difficulty."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.solver.generator import generate_sudoku
from backend.solver.geometry import DIFFICULTIES, SUPPORTED_SIZES


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku generation runtime")
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        choices=SUPPORTED_SIZES,
        default=[6, 9],
        help="Grid sizes to benchmark",
    )
    parser.add_argument(
        "--difficulties",
        nargs="+",
        choices=DIFFICULTIES,
        default=list(DIFFICULTIES),
        help="Difficulties to benchmark",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=3,
        help="Number of puzzles per size/difficulty pair",
    )
    parser.add_argument("--seed", type=int, default=0, help="Base random seed")
    return parser.parse_args()


def run_benchmark(size: int, difficulty: str, rounds: int, seed: int):
    rng = random.Random(seed)
    clues = []
    start = time.perf_counter()

    for _ in range(rounds):
        result = generate_sudoku(size, difficulty, rng=rng)
        clues.append(result.clues)

    elapsed = time.perf_counter() - start
    return elapsed, elapsed / rounds, sum(clues) / len(clues)


def main() -> int:
    args = parse_args()
    rounds = max(1, args.rounds)

    print("Generation benchmark results")
    print(f"rounds={rounds} seed={args.seed}")
    for size in args.sizes:
        for difficulty in args.difficulties:
            total, avg, avg_clues = run_benchmark(size, difficulty, rounds, args.seed)
            print(
                f"size={size} difficulty={difficulty} "
                f"total={total:.3f}s avg_per_puzzle={avg:.3f}s "
                f"avg_clues={avg_clues:.1f}"
            )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
