"""Sudoku solver using backtracking algorithm."""

import copy
import random
from typing import Optional, Tuple

from .constraints import is_valid_placement
from .geometry import EMPTY, Grid, GridInfo


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search visits more nodes than its budget allows."""


class SudokuSolver:
    """Solves and counts solutions of Sudoku grids using backtracking."""

    def __init__(
        self,
        info: GridInfo,
        rng: Optional[random.Random] = None,
        max_nodes: Optional[int] = None,
    ):
        self.info = info
        self.rng = rng if rng is not None else random.Random()
        self.max_nodes = max_nodes
        self.solutions_count = 0
        self.nodes_visited = 0

    def solve(self, grid: Grid) -> bool:
        """
        Fill every empty cell of the grid in place.

        Candidate values are tried in a random order so that repeated calls
        on the same input produce different completions.

        Args:
            grid: Grid with 0 for empty cells, modified in place

        Returns:
            True if the grid was completed, False if it is unsolvable

        Raises:
            SearchBudgetExceeded: If more than max_nodes nodes are visited
        """
        self.nodes_visited = 0
        return self._solve_recursive(grid, 0)

    def _solve_recursive(self, grid: Grid, start: int) -> bool:
        """Recursively solve the puzzle using backtracking."""
        self.nodes_visited += 1
        self._check_budget()
        empty = self._find_empty_cell(grid, start)
        if not empty:
            return True

        row, col = empty

        nums = list(range(1, self.info.max_val + 1))
        self.rng.shuffle(nums)

        for num in nums:
            if is_valid_placement(grid, row, col, num, self.info):
                grid[row][col] = num

                if self._solve_recursive(grid, row * self.info.cols + col + 1):
                    return True

                grid[row][col] = EMPTY

        return False

    def _find_empty_cell(
        self, grid: Grid, start: int = 0
    ) -> Optional[Tuple[int, int]]:
        """
        Find the next empty cell in row-major order.

        Args:
            grid: Current grid state
            start: Flat index to start scanning from; every cell before it
                must already be filled

        Returns:
            Tuple of (row, col) if empty cell found, None otherwise
        """
        cols = self.info.cols
        for idx in range(start, self.info.rows * cols):
            r, c = divmod(idx, cols)
            if grid[r][c] == EMPTY:
                return (r, c)
        return None

    def _check_budget(self) -> None:
        if self.max_nodes is not None and self.nodes_visited > self.max_nodes:
            raise SearchBudgetExceeded(
                f"Search exceeded {self.max_nodes} nodes"
            )

    def find_dead_cell(self, grid: Grid) -> Optional[Tuple[int, int]]:
        """
        Find an empty cell that no value can be placed in.

        Args:
            grid: Current grid state

        Returns:
            Tuple of (row, col) of the first such cell, None if every empty
            cell has at least one candidate
        """
        for r in range(self.info.rows):
            for c in range(self.info.cols):
                if grid[r][c] != EMPTY:
                    continue
                if not any(
                    is_valid_placement(grid, r, c, num, self.info)
                    for num in range(1, self.info.max_val + 1)
                ):
                    return (r, c)
        return None

    def count_solutions(self, grid: Grid, limit: int = 2) -> int:
        """
        Count number of solutions (up to limit).

        Args:
            grid: Grid to inspect, left untouched
            limit: Stop counting after finding this many solutions

        Returns:
            Number of solutions found

        Raises:
            SearchBudgetExceeded: If more than max_nodes nodes are visited
        """
        self.solutions_count = 0
        self.nodes_visited = 0
        grid_copy = copy.deepcopy(grid)
        if not self.is_consistent_grid(grid_copy):
            return 0
        self._count_solutions_recursive(grid_copy, 0, limit)
        return self.solutions_count

    def _count_solutions_recursive(self, grid: Grid, start: int, limit: int) -> None:
        """Recursively count solutions, stopping at limit."""
        if self.solutions_count >= limit:
            return

        self.nodes_visited += 1
        self._check_budget()
        empty = self._find_empty_cell(grid, start)
        if not empty:
            self.solutions_count += 1
            return

        row, col = empty
        next_start = row * self.info.cols + col + 1

        for num in range(1, self.info.max_val + 1):
            if is_valid_placement(grid, row, col, num, self.info):
                grid[row][col] = num
                self._count_solutions_recursive(grid, next_start, limit)
                grid[row][col] = EMPTY
                if self.solutions_count >= limit:
                    return

    def is_consistent_grid(self, grid: Grid) -> bool:
        """Check existing non-zero givens are mutually consistent."""
        for r in range(self.info.rows):
            for c in range(self.info.cols):
                num = grid[r][c]
                if num == EMPTY:
                    continue
                grid[r][c] = EMPTY
                valid = is_valid_placement(grid, r, c, num, self.info)
                grid[r][c] = num
                if not valid:
                    return False
        return True


def solve(grid: Grid, info: GridInfo, rng: Optional[random.Random] = None) -> bool:
    """Convenience function to solve a grid in place."""
    solver = SudokuSolver(info, rng=rng)
    return solver.solve(grid)


def count_solutions(grid: Grid, info: GridInfo, limit: int = 2) -> int:
    """Convenience function to count solutions of a grid up to limit."""
    solver = SudokuSolver(info)
    return solver.count_solutions(grid, limit=limit)


def is_valid_grid(grid: Grid, info: GridInfo) -> bool:
    """
    Validate that a grid has correct structure and initial values.

    Args:
        grid: Grid to validate
        info: Expected geometry

    Returns:
        True if grid is valid, False otherwise
    """
    if not isinstance(grid, list) or len(grid) != info.rows:
        return False

    for row in grid:
        if not isinstance(row, list) or len(row) != info.cols:
            return False
        for cell in row:
            if not isinstance(cell, int) or cell < EMPTY or cell > info.max_val:
                return False

    # Check no duplicate values in rows, cols, sub-blocks
    solver = SudokuSolver(info)
    return solver.is_consistent_grid(grid)
