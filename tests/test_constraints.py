"""Tests for placement validation and conflict detection."""

import pytest

from backend.solver.constraints import (
    get_conflicts,
    is_valid_placement,
    position_key,
)
from backend.solver.geometry import SUPPORTED_SIZES, empty_grid, get_grid_info


class TestIsValidPlacement:
    """Tests for single placement checks."""

    def test_empty_grid_accepts_any_value(self):
        info = get_grid_info(9)
        grid = empty_grid(info)

        assert all(is_valid_placement(grid, 4, 4, v, info) for v in range(1, 10))

    def test_rejects_value_in_row(self):
        info = get_grid_info(9)
        grid = empty_grid(info)
        grid[2][8] = 5

        assert is_valid_placement(grid, 2, 0, 5, info) is False
        assert is_valid_placement(grid, 3, 0, 5, info) is True

    def test_rejects_value_in_column(self):
        info = get_grid_info(9)
        grid = empty_grid(info)
        grid[8][1] = 7

        assert is_valid_placement(grid, 0, 1, 7, info) is False

    def test_rejects_value_in_rectangular_sub_block(self):
        info = get_grid_info(6)
        grid = empty_grid(info)
        # Sub-block anchored at (2, 3) spans rows 2-3, cols 3-5
        grid[3][5] = 4

        assert is_valid_placement(grid, 2, 3, 4, info) is False
        # (1, 3) sits in the block above and shares neither row nor column
        assert is_valid_placement(grid, 1, 3, 4, info) is True
        # (3, 2) is in the neighbouring block but shares the row
        assert is_valid_placement(grid, 3, 2, 4, info) is False
        # (2, 2) is in the neighbouring block with no shared row or column
        assert is_valid_placement(grid, 2, 2, 4, info) is True


class TestGetConflicts:
    """Tests for live conflict detection."""

    @pytest.mark.parametrize("size", SUPPORTED_SIZES)
    def test_complete_solution_has_no_conflicts(self, size, solved_grid):
        info = get_grid_info(size)

        assert get_conflicts(solved_grid(size), info) == set()

    def test_empty_grid_has_no_conflicts(self):
        info = get_grid_info(16)

        assert get_conflicts(empty_grid(info), info) == set()

    def test_row_duplicates_are_both_reported(self):
        info = get_grid_info(9)
        grid = empty_grid(info)
        grid[0][0] = 3
        grid[0][8] = 3

        assert get_conflicts(grid, info) == {(0, 0), (0, 8)}

    def test_column_duplicates_are_both_reported(self):
        info = get_grid_info(9)
        grid = empty_grid(info)
        grid[1][4] = 9
        grid[7][4] = 9

        assert get_conflicts(grid, info) == {(1, 4), (7, 4)}

    def test_sub_block_duplicates_are_both_reported(self):
        info = get_grid_info(6)
        grid = empty_grid(info)
        grid[0][0] = 2
        grid[1][2] = 2

        assert get_conflicts(grid, info) == {(0, 0), (1, 2)}

    def test_all_members_of_a_value_group_are_reported(self):
        info = get_grid_info(9)
        grid = empty_grid(info)
        grid[5][0] = 1
        grid[5][4] = 1
        grid[5][8] = 1
        grid[5][6] = 2

        assert get_conflicts(grid, info) == {(5, 0), (5, 4), (5, 8)}

    def test_swapped_cells_in_solution_are_flagged(self, solved_grid):
        info = get_grid_info(9)
        grid = solved_grid(9)
        grid[0][0], grid[0][1] = grid[0][1], grid[0][0]

        conflicts = get_conflicts(grid, info)

        assert (0, 0) in conflicts
        assert (0, 1) in conflicts

    def test_result_does_not_depend_on_previous_calls(self):
        info = get_grid_info(9)
        grid = empty_grid(info)
        grid[0][0] = 3
        grid[0][1] = 3
        assert get_conflicts(grid, info)

        grid[0][1] = 0
        assert get_conflicts(grid, info) == set()


def test_position_key():
    assert position_key(3, 12) == "3-12"
