"""Row, column and sub-block uniqueness checks."""

from typing import Dict, Iterable, List, Set

from .geometry import EMPTY, Grid, GridInfo, Position


def is_valid_placement(
    grid: Grid, row: int, col: int, num: int, info: GridInfo
) -> bool:
    """
    Check if placing num at (row, col) is valid.

    The target cell is not excluded from the scan, so it is expected to be
    empty when this is called.

    Args:
        grid: Current grid state
        row: Row index
        col: Column index
        num: Number to place (1..max_val)
        info: Geometry of the grid

    Returns:
        True if placement is valid, False otherwise
    """
    # Check row
    if num in grid[row]:
        return False

    # Check column
    for r in range(info.rows):
        if grid[r][col] == num:
            return False

    # Check sub-block
    box_row = row - row % info.sub_rows
    box_col = col - col % info.sub_cols

    for r in range(box_row, box_row + info.sub_rows):
        for c in range(box_col, box_col + info.sub_cols):
            if grid[r][c] == num:
                return False

    return True


def iter_units(info: GridInfo) -> Iterable[List[Position]]:
    """Yield the positions of every row, column and sub-block."""
    for r in range(info.rows):
        yield [(r, c) for c in range(info.cols)]

    for c in range(info.cols):
        yield [(r, c) for r in range(info.rows)]

    for box_row in range(0, info.rows, info.sub_rows):
        for box_col in range(0, info.cols, info.sub_cols):
            yield [
                (box_row + r, box_col + c)
                for r in range(info.sub_rows)
                for c in range(info.sub_cols)
            ]


def get_conflicts(grid: Grid, info: GridInfo) -> Set[Position]:
    """
    Find every filled cell that shares its value with another cell of the
    same row, column or sub-block.

    Recomputed from scratch on each call; a cell flagged by several units
    appears once.
    """
    conflicts: Set[Position] = set()

    for unit in iter_units(info):
        seen: Dict[int, List[Position]] = {}
        for r, c in unit:
            val = grid[r][c]
            if val != EMPTY:
                seen.setdefault(val, []).append((r, c))

        for positions in seen.values():
            if len(positions) > 1:
                conflicts.update(positions)

    return conflicts


def position_key(row: int, col: int) -> str:
    """Identifier of a cell as used by the UI (``"row-col"``)."""
    return f"{row}-{col}"
