import pytest

from core.navigation import GRID_COLUMNS, clamp, grid_move, grid_rows, last_index, move


@pytest.mark.parametrize("length", [0, 1, 2, 7])
@pytest.mark.parametrize("index", [-10, -1, 0, 1, 3, 6, 7, 100])
def test_clamp_stays_in_bounds(index, length):
    result = clamp(index, length)
    if length == 0:
        assert result == 0
    else:
        assert 0 <= result <= length - 1


def test_move_does_not_wrap():
    assert move(0, -1, 3) == 0
    assert move(2, 1, 3) == 2
    assert move(1, 5, 10) == 6
    assert move(8, 5, 10) == 9


def test_last_index():
    assert last_index(0) == 0
    assert last_index(4) == 3


def test_grid_move_ignores_moves_off_the_grid():
    count = 10
    assert grid_move(0, -1, count) == 0
    assert grid_move(0, -GRID_COLUMNS, count) == 0
    assert grid_move(8, GRID_COLUMNS, count) == 8
    assert grid_move(5, GRID_COLUMNS, count) == 9
    assert grid_move(3, 1, count) == 4


def test_grid_rows():
    assert grid_rows(0) == 0
    assert grid_rows(4) == 1
    assert grid_rows(5) == 2
    assert grid_rows(20) == 5
