import pytest

from aocsolver.y2018.day11 import Grid, Square, power_level

GRID_SIZE = 300
SQUARE_SIZE = 3


@pytest.fixture(scope="module")
def grid_18():
    return Grid(18, GRID_SIZE)


@pytest.mark.parametrize(
    "x, y, serial, expected",
    [(122, 79, 57, -5), (217, 196, 39, 0), (101, 153, 71, 4)],
)
def test_power_level(x, y, serial, expected):
    assert power_level(x, y, serial) == expected


@pytest.mark.parametrize(
    "x, y, serial, expected",
    [(122, 79, 57, -5), (217, 196, 39, 0), (101, 153, 71, 4)],
)
def test_grid_power_level(x, y, serial, expected):
    grid = Grid(serial, GRID_SIZE)
    assert grid.get(x, y) == expected


def test_square_power_level(grid_18):
    assert grid_18.square_power(33, 45, SQUARE_SIZE) == 29


def test_largest_power_level_square(grid_18):
    square = grid_18.square_with_largest_power(SQUARE_SIZE)
    assert square.power_level == 29
    assert square.top_left == (33, 45)
    assert square.size == SQUARE_SIZE


def test_largest_power(grid_18):
    assert grid_18.largest_power() == Square((90, 269), 16, 113)


def test_square_power_matches_single_cell(grid_18):
    assert grid_18.square_power(33, 45, 1) == grid_18.get(33, 45)


def test_get_outside_grid_raises(grid_18):
    with pytest.raises(IndexError):
        grid_18.get(GRID_SIZE, 0)


def test_square_too_large_raises(grid_18):
    with pytest.raises(ValueError):
        grid_18.square_with_largest_power(GRID_SIZE + 1)


def test_square_power_outside_raises(grid_18):
    with pytest.raises(ValueError):
        grid_18.square_power(299, 299, 3)