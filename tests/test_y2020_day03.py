import pytest

from aocsolver.y2020.day03 import count_trees, solve_part_1, solve_part_2

EXAMPLE = (
    "..##.......\n"
    "#...#...#..\n"
    ".#....#..#.\n"
    "..#.#...#.#\n"
    ".#...##..#.\n"
    "..#.##.....\n"
    ".#.#.#....#\n"
    ".#........#\n"
    "#.##...#...\n"
    "#...##....#\n"
    ".#..#...#.#\n"
)


def test_should_solve_part_1_preview():
    assert solve_part_1(EXAMPLE) == 7


def test_should_solve_part_2_preview():
    assert solve_part_2(EXAMPLE) == 336


def test_count_trees_wraps_around():
    assert count_trees(["..", ".#", "#."], (1, 1)) == 2


def test_count_trees_skipping_rows():
    assert count_trees(["...", "###", "#.."], (2, 0)) == 1


def test_empty_map_raises():
    with pytest.raises(ValueError):
        solve_part_1("")