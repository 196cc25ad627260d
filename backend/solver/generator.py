"""Puzzle generation by seeding, solving and removing clues."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Tuple

from .backtracking import SudokuSolver
from .geometry import (
    DIFFICULTIES,
    EMPTY,
    Grid,
    GridInfo,
    copy_grid,
    empty_grid,
    get_grid_info,
)

_LOGGER = logging.getLogger(__name__)

# Clues left in the puzzle, not cells removed.
TARGET_CLUES: dict[int, dict[str, int]] = {
    6: {"easy": 20, "medium": 16, "hard": 12},
    9: {"easy": 38, "medium": 30, "hard": 24},
    16: {"easy": 140, "medium": 120, "hard": 100},
}

# Larger grids skip the uniqueness check; counting solutions is too slow.
UNIQUENESS_CHECK_MAX_SIZE = 9

FrozenGrid = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class PuzzleResult:
    """A generated puzzle and the solution it was carved from."""

    size: int
    difficulty: str
    puzzle: FrozenGrid
    solution: FrozenGrid

    @property
    def clues(self) -> int:
        return sum(1 for row in self.puzzle for cell in row if cell != EMPTY)

    @property
    def unique_verified(self) -> bool:
        return self.size <= UNIQUENESS_CHECK_MAX_SIZE

    def puzzle_grid(self) -> Grid:
        return copy_grid(self.puzzle)

    def solution_grid(self) -> Grid:
        return copy_grid(self.solution)


def target_clues(size: int, difficulty: str) -> int:
    if difficulty not in DIFFICULTIES:
        raise ValueError(
            f"Unsupported difficulty {difficulty!r}; expected one of {DIFFICULTIES}"
        )
    get_grid_info(size)
    return TARGET_CLUES[size][difficulty]


def _fill_sub_block(
    grid: Grid, row: int, col: int, info: GridInfo, rng: random.Random
) -> None:
    """Fill one sub-block with a random permutation by rejection sampling."""
    for i in range(info.sub_rows):
        for j in range(info.sub_cols):
            num = rng.randint(1, info.max_val)
            while not _is_unused_in_sub_block(grid, row, col, num, info):
                num = rng.randint(1, info.max_val)
            grid[row + i][col + j] = num


def _is_unused_in_sub_block(
    grid: Grid, row_start: int, col_start: int, num: int, info: GridInfo
) -> bool:
    for i in range(info.sub_rows):
        for j in range(info.sub_cols):
            if grid[row_start + i][col_start + j] == num:
                return False
    return True


def _seed_diagonal(grid: Grid, info: GridInfo, rng: random.Random) -> None:
    # Diagonal sub-blocks share no row, column or block with each other.
    if info.sub_rows != info.sub_cols:
        return
    for start in range(0, info.rows, info.sub_rows):
        _fill_sub_block(grid, start, start, info, rng)


def _remove_clues(
    puzzle: Grid,
    info: GridInfo,
    solver: SudokuSolver,
    clues: int,
    check_uniqueness: bool,
    rng: random.Random,
) -> Tuple[int, int]:
    """
    Clear cells in random order down to ``clues`` remaining.

    Returns:
        Tuple of (cells removed, removal attempts)
    """
    positions = [(r, c) for r in range(info.rows) for c in range(info.cols)]
    rng.shuffle(positions)

    max_to_remove = info.cell_count - clues
    removed = 0
    attempts = 0

    for r, c in positions:
        if removed >= max_to_remove:
            break

        attempts += 1
        value = puzzle[r][c]
        puzzle[r][c] = EMPTY

        if check_uniqueness and solver.count_solutions(puzzle, limit=2) != 1:
            puzzle[r][c] = value
        else:
            removed += 1

    return removed, attempts


def generate_sudoku(
    size: int, difficulty: str, rng: random.Random | None = None
) -> PuzzleResult:
    """
    Generate a puzzle/solution pair.

    Sizes 6 and 9 only keep a removal when the puzzle still has exactly one
    solution; 16x16 puzzles are not verified and may be ambiguous.

    Args:
        size: Grid size (6, 9 or 16)
        difficulty: "easy", "medium" or "hard"
        rng: Random source; a fresh unseeded one when omitted

    Returns:
        PuzzleResult with the puzzle and its solution
    """
    info = get_grid_info(size)
    clues = target_clues(size, difficulty)
    rng = rng if rng is not None else random.Random()
    started = time.perf_counter()

    grid = empty_grid(info)
    _seed_diagonal(grid, info, rng)

    solver = SudokuSolver(info, rng=rng)
    if not solver.solve(grid):
        raise RuntimeError(f"Failed to complete seeded {size}x{size} grid")
    solution = copy_grid(grid)

    removed, attempts = _remove_clues(
        grid,
        info,
        solver,
        clues,
        check_uniqueness=size <= UNIQUENESS_CHECK_MAX_SIZE,
        rng=rng,
    )

    _LOGGER.debug(
        "Generated %dx%d %s puzzle: removed=%d attempts=%d clues=%d in %.1f ms",
        size,
        size,
        difficulty,
        removed,
        attempts,
        info.cell_count - removed,
        (time.perf_counter() - started) * 1000.0,
    )

    return PuzzleResult(
        size=size,
        difficulty=difficulty,
        puzzle=tuple(tuple(row) for row in grid),
        solution=tuple(tuple(row) for row in solution),
    )
