"""Grid geometry for the supported Sudoku sizes."""

from dataclasses import dataclass
from typing import List, Literal, Sequence, Tuple

SudokuSize = Literal[6, 9, 16]
Difficulty = Literal["easy", "medium", "hard"]

Grid = List[List[int]]
Position = Tuple[int, int]

EMPTY = 0
SUPPORTED_SIZES: Tuple[int, ...] = (6, 9, 16)
DIFFICULTIES: Tuple[str, ...] = ("easy", "medium", "hard")


@dataclass(frozen=True)
class GridInfo:
    """Structural parameters of a square grid and its sub-block tiling."""

    rows: int
    cols: int
    sub_rows: int
    sub_cols: int
    max_val: int

    @property
    def size(self) -> int:
        return self.rows

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols


_GRID_INFO = {
    6: GridInfo(rows=6, cols=6, sub_rows=2, sub_cols=3, max_val=6),
    9: GridInfo(rows=9, cols=9, sub_rows=3, sub_cols=3, max_val=9),
    16: GridInfo(rows=16, cols=16, sub_rows=4, sub_cols=4, max_val=16),
}


def get_grid_info(size: int) -> GridInfo:
    """
    Look up the geometry for a grid size.

    Args:
        size: Edge length, one of 6, 9 or 16

    Returns:
        GridInfo for that size

    Raises:
        ValueError: If the size is not supported
    """
    try:
        return _GRID_INFO[size]
    except KeyError:
        raise ValueError(
            f"Unsupported grid size {size!r}; expected one of {SUPPORTED_SIZES}"
        ) from None


def empty_grid(info: GridInfo) -> Grid:
    """Build a grid with every cell empty."""
    return [[EMPTY] * info.cols for _ in range(info.rows)]


def copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in grid]
