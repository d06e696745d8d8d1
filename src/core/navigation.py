from __future__ import annotations

GRID_COLUMNS = 4
PAGE_STEP = 5


def clamp(index: int, length: int) -> int:
    """Nearest valid index into a list of `length` items; 0 when the list is empty."""
    if length <= 0:
        return 0
    return min(max(index, 0), length - 1)


def move(index: int, delta: int, length: int) -> int:
    return clamp(index + delta, length)


def last_index(length: int) -> int:
    return clamp(length - 1, length)


def grid_move(index: int, offset: int, count: int) -> int:
    # Moves that would leave the grid are ignored rather than clamped.
    new_index = index + offset
    if 0 <= new_index < count:
        return new_index
    return index


def grid_rows(count: int, columns: int = GRID_COLUMNS) -> int:
    columns = max(columns, 1)
    return (count + columns - 1) // columns
