"""Rucksack reorganisation."""

import re

_LINE = re.compile(r"([A-Za-z]+)\n")


def priority(item):
    """Return the priority of an item letter: a-z are 1-26, A-Z are 27-52."""
    if "a" <= item <= "z":
        return ord(item) - 96
    if "A" <= item <= "Z":
        return ord(item) - 38
    raise ValueError(f"item is not an ASCII letter: {item!r}")


def parse_input(text):
    """Parse even-length lines of letters; their count must be a multiple of 3."""
    rucksacks = []
    pos = 0
    while (match := _LINE.match(text, pos)) is not None:
        items = match.group(1)
        if len(items) % 2:
            break
        rucksacks.append(items)
        pos = match.end()
    if not rucksacks:
        raise ValueError("input holds no rucksacks")
    if len(rucksacks) % 3:
        raise ValueError("number of rucksacks is not a multiple of three")
    return rucksacks


def _common(*groups):
    shared = set(groups[0]).intersection(*groups[1:])
    if not shared:
        raise ValueError("no item is shared")
    return min(shared)


def solve_part_1(text):
    """Sum of priorities of the item found in both compartments."""
    total = 0
    for rucksack in parse_input(text):
        half = len(rucksack) // 2
        total += priority(_common(rucksack[:half], rucksack[half:]))
    return total


def solve_part_2(text):
    """Sum of priorities of the badge shared by each group of three."""
    rucksacks = parse_input(text)
    groups = zip(*[iter(rucksacks)] * 3)
    return sum(priority(_common(*group)) for group in groups)