import pytest

from aocsolver.y2024.day06 import solve_part_1, solve_part_2

INPUT = (
    "....#.....\n"
    ".........#\n"
    "..........\n"
    "..#.......\n"
    ".......#..\n"
    "..........\n"
    ".#..^.....\n"
    "........#.\n"
    "#.........\n"
    "......#..."
)


def test_solve_part_1():
    assert solve_part_1(INPUT) == 41


def test_solve_part_2():
    assert solve_part_2(INPUT) == 6


def test_guard_walking_straight_out_visits_its_column():
    assert solve_part_1("...\n...\n.^.") == 3


def test_map_without_guard_raises():
    with pytest.raises(ValueError):
        solve_part_1("...\n.#.\n...")


def test_empty_map_raises():
    with pytest.raises(ValueError):
        solve_part_2("")