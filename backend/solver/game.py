"""Player-facing board: clue cells, user entries and win detection."""

from __future__ import annotations

from typing import Sequence

from .constraints import get_conflicts
from .geometry import EMPTY, Grid, GridInfo, Position, copy_grid


class GameBoard:
    """Tracks user entries on top of a generated puzzle.

    Clue cells are fixed; the solution is only used to detect a win.
    """

    def __init__(
        self,
        puzzle: Sequence[Sequence[int]],
        grid: Sequence[Sequence[int]],
        solution: Sequence[Sequence[int]],
        info: GridInfo,
    ):
        self.info = info
        self.givens = [[cell != EMPTY for cell in row] for row in puzzle]
        self.grid: Grid = copy_grid(grid)
        self.solution: Grid = copy_grid(solution)

    def is_given(self, row: int, col: int) -> bool:
        return self.givens[row][col]

    def enter(self, row: int, col: int, value: int) -> bool:
        """
        Store a user entry; EMPTY clears the cell.

        Returns:
            False when the entry is ignored (out of bounds, clue cell, value
            out of range, or the game is already won)
        """
        if not (0 <= row < self.info.rows and 0 <= col < self.info.cols):
            return False
        if not (EMPTY <= value <= self.info.max_val):
            return False
        if self.is_given(row, col) or self.is_won():
            return False

        self.grid[row][col] = value
        return True

    def conflicts(self) -> set[Position]:
        return get_conflicts(self.grid, self.info)

    def is_complete(self) -> bool:
        return all(cell != EMPTY for row in self.grid for cell in row)

    def is_won(self) -> bool:
        return self.grid == self.solution
