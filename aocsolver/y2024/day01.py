"""Historian hysteria: compare two location id lists."""

import re
from collections import Counter
from dataclasses import dataclass

_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass
class LocationLists:
    """Both columns of location ids, each sorted ascending."""

    x: list
    y: list


def _number(value):
    if not _NUMBER.fullmatch(value):
        raise ValueError(f"not a non-negative integer: {value!r}")
    return int(value)


def parse(text):
    """Parse two whitespace separated columns into sorted lists."""
    x, y = [], []
    for line in text.splitlines():
        columns = line.split()
        if len(columns) < 2:
            raise ValueError(f"line needs two columns: {line!r}")
        x.append(_number(columns[0]))
        y.append(_number(columns[1]))
    return LocationLists(sorted(x), sorted(y))


def solve_part_1(lists):
    """Total distance between the paired sorted ids."""
    return sum(abs(a - b) for a, b in zip(lists.x, lists.y))


def solve_part_2(lists):
    """Similarity score: each left id times its count in the right list."""
    counts = Counter(lists.y)
    return sum(value * counts[value] for value in lists.x)