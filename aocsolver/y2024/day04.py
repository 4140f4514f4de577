"""Ceres search: word search for XMAS."""

from itertools import product

_WORD = "XMAS"
_DIRECTIONS = [(di, dj) for di, dj in product((-1, 0, 1), repeat=2) if (di, dj) != (0, 0)]


def _grid(text):
    grid = text.splitlines()
    if not grid:
        raise ValueError("grid is empty")
    return grid


def _fits(i, j, di, dj, width):
    # Row bounds are checked against the width as well; the grid is square.
    last = len(_WORD) - 1
    row_ok = di == 0 or (i <= width - len(_WORD) if di > 0 else i >= last)
    col_ok = dj == 0 or (j <= width - len(_WORD) if dj > 0 else j >= last)
    return row_ok and col_ok


def _spells(grid, i, j, di, dj):
    return all(grid[i + k * di][j + k * dj] == c for k, c in enumerate(_WORD))


def solve_part_1(text):
    """Count XMAS in all eight directions."""
    grid = _grid(text)
    height, width = len(grid), len(grid[0])
    return sum(
        1
        for i, j in product(range(height), range(width))
        for di, dj in _DIRECTIONS
        if _fits(i, j, di, dj, width) and _spells(grid, i, j, di, dj)
    )


def solve_part_2(text):
    """Count X shapes of two diagonal MAS words crossing at their A."""
    grid = _grid(text)
    height, width = len(grid), len(grid[0])
    pair = {"M", "S"}
    return sum(
        1
        for i, j in product(range(height), range(width))
        if 0 < i < width - 1
        and 0 < j < height - 1
        and grid[i][j] == "A"
        and {grid[i - 1][j - 1], grid[i + 1][j + 1]} == pair
        and {grid[i + 1][j - 1], grid[i - 1][j + 1]} == pair
    )