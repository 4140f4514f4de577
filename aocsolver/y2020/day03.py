"""Toboggan trajectory: count trees hit on a repeating slope."""

from math import prod

_SLOPES = ((1, 1), (1, 3), (1, 5), (1, 7), (2, 1))


def _parse(text):
    biome = text.splitlines()
    if not biome:
        raise ValueError("map is empty")
    return biome


def count_trees(biome, slope):
    """Count '#' cells met moving (down, right) from the top-left corner.

    The map repeats endlessly to the right.
    """
    if not biome:
        raise ValueError("map is empty")
    down, right = slope
    width = len(biome[0])
    return sum(
        1
        for step, row in enumerate(range(down, len(biome), down), 1)
        if biome[row][(step * right) % width] == "#"
    )


def solve_part_1(text):
    """Trees hit going down 1, right 3."""
    return count_trees(_parse(text), (1, 3))


def solve_part_2(text):
    """Product of trees hit on all five slopes."""
    biome = _parse(text)
    return prod(count_trees(biome, slope) for slope in _SLOPES)