"""Tests for value labels and key mapping."""

import pytest

from backend.solver.geometry import EMPTY, empty_grid, get_grid_info
from backend.solver.labels import format_value, parse_value, render_grid


def test_format_value_decimal_sizes():
    assert format_value(EMPTY, 9) == ""
    assert format_value(6, 6) == "6"
    assert format_value(9, 9) == "9"


def test_format_value_16_uses_letters():
    labels = [format_value(v, 16) for v in range(1, 17)]

    assert labels == list("123456789ABCDEFG")


@pytest.mark.parametrize(
    "key,size,expected",
    [
        ("5", 9, 5),
        ("6", 6, 6),
        ("7", 6, None),
        ("9", 16, 9),
        ("a", 16, 10),
        ("G", 16, 16),
        ("H", 16, None),
        ("A", 9, None),
        ("Backspace", 9, EMPTY),
        ("Delete", 16, EMPTY),
        ("0", 9, None),
        (".", 9, None),
        ("ArrowUp", 9, None),
        ("", 9, None),
    ],
)
def test_parse_value(key, size, expected):
    assert parse_value(key, size) == expected


def test_parse_round_trips_labels():
    for value in range(1, 17):
        assert parse_value(format_value(value, 16), 16) == value


def test_render_grid_6x6():
    info = get_grid_info(6)
    grid = empty_grid(info)
    grid[0][0] = 1
    grid[5][5] = 6

    lines = render_grid(grid, info).splitlines()

    # 6 rows plus separators after rows 1 and 3
    assert len(lines) == 8
    assert lines[0] == " 1 . . | . . . "
    assert lines[2] == "-------+-------"
    assert lines[-1] == " . . . | . . 6 "
