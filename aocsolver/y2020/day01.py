"""Report repair: entries that sum to a target."""

import re
from itertools import combinations
from math import prod

_NUMBER = re.compile(r"\+?[0-9]+")


def _parse(text):
    numbers = []
    for line in text.splitlines():
        if not _NUMBER.fullmatch(line):
            raise ValueError(f"not a non-negative integer: {line!r}")
        numbers.append(int(line))
    return numbers


def _find(text, target, size):
    for entries in combinations(_parse(text), size):
        if sum(entries) == target:
            return prod(entries)
    return None


def solve_part_1(text, target):
    """Product of the first two entries summing to target, or None."""
    return _find(text, target, 2)


def solve_part_2(text, target):
    """Product of the first three entries summing to target, or None."""
    return _find(text, target, 3)