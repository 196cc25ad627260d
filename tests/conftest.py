"""Shared fixtures for engine and API tests."""

import pytest

from backend.solver.geometry import get_grid_info


def _pattern_value(row: int, col: int, info) -> int:
    offset = info.sub_cols * (row % info.sub_rows) + row // info.sub_rows
    return (offset + col) % info.max_val + 1


@pytest.fixture
def solved_grid():
    """Returns a function that builds a complete valid grid for a size."""

    def _build(size: int) -> list[list[int]]:
        info = get_grid_info(size)
        return [
            [_pattern_value(r, c, info) for c in range(info.cols)]
            for r in range(info.rows)
        ]

    return _build
