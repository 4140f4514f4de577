"""Guard gallivant: trace a patrolling guard and find loop-making obstacles."""

from itertools import product

_ARROWS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_TURN_RIGHT = {(-1, 0): (0, 1), (0, 1): (1, 0), (1, 0): (0, -1), (0, -1): (-1, 0)}


def _parse(text):
    grid = text.splitlines()
    if not grid:
        raise ValueError("map is empty")
    height, width = len(grid), len(grid[0])
    start = None
    for i, j in product(range(height), range(width)):
        direction = _ARROWS.get(grid[i][j])
        if direction is not None:
            start = ((i, j), direction)
    if start is None:
        raise ValueError("map holds no guard")
    return grid, height, width, start


def solve_part_1(text):
    """Number of distinct cells the guard visits before leaving the map."""
    grid, height, width, (pos, direction) = _parse(text)
    visited = {pos}
    while True:
        y, x = pos[0] + direction[0], pos[1] + direction[1]
        if not (0 <= y < height and 0 <= x < width):
            break
        if grid[y][x] == "#":
            direction = _TURN_RIGHT[direction]
        else:
            pos = (y, x)
            visited.add(pos)
    return len(visited)


def _loops(grid, height, width, start, obstacle):
    pos, direction = start
    seen = set()
    while True:
        y, x = pos[0] + direction[0], pos[1] + direction[1]
        if not (0 <= y < height and 0 <= x < width):
            return False
        if (y, x) == obstacle or grid[y][x] == "#":
            direction = _TURN_RIGHT[direction]
        else:
            pos = (y, x)
        state = (pos, direction)
        if state in seen:
            return True
        seen.add(state)


def solve_part_2(text):
    """Number of empty cells where one new obstacle traps the guard in a loop."""
    grid, height, width, start = _parse(text)
    return sum(
        1
        for i, j in product(range(height), range(width))
        if grid[i][j] == "." and _loops(grid, height, width, start, (i, j))
    )