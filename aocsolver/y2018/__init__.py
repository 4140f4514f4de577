"""Solutions to the 2018 puzzles."""

__all__ = [
    "day01",
    "day02",
    "day03",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "day11",
    "day12",
    "day14",
]