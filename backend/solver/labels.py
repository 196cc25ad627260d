"""Display labels and keyboard input mapping for cell values."""

from typing import Optional

from .geometry import EMPTY, Grid, GridInfo

HEX_LABELS = "123456789ABCDEFG"
CLEAR_KEYS = frozenset({"Backspace", "Delete"})


def format_value(value: int, size: int) -> str:
    """Label shown for a cell value; 16x16 grids use 1-9 then A-G."""
    if value == EMPTY:
        return ""
    if size == 16:
        return HEX_LABELS[value - 1]
    return str(value)


def parse_value(key: str, size: int) -> Optional[int]:
    """
    Map a key press to a cell value.

    Returns:
        The value, EMPTY for a clearing key, or None when the key does not
        apply to this grid size
    """
    if key in CLEAR_KEYS:
        return EMPTY

    if len(key) != 1:
        return None

    if key in HEX_LABELS[:9]:
        num = int(key)
        return num if num <= min(size, 9) else None

    if size == 16 and key.upper() in HEX_LABELS[9:]:
        return HEX_LABELS.index(key.upper()) + 1

    return None


def render_grid(grid: Grid, info: GridInfo) -> str:
    """Render a grid as text with sub-block separators."""
    block_width = info.sub_cols * 2 + 1
    separator = "+".join(["-" * block_width] * (info.cols // info.sub_cols))

    lines = []
    for r, row in enumerate(grid):
        if r and r % info.sub_rows == 0:
            lines.append(separator)
        blocks = []
        for start in range(0, info.cols, info.sub_cols):
            cells = [
                format_value(v, info.size) or "."
                for v in row[start:start + info.sub_cols]
            ]
            blocks.append(" " + " ".join(cells) + " ")
        lines.append("|".join(blocks))
    return "\n".join(lines)
