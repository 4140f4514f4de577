"""Calorie counting: find the elves carrying the most food."""

import re

_ELF = re.compile(r"((?:\d+\n)+)\n?")


def parse_input(text):
    """Parse blank-line separated groups of calorie counts.

    Parsing stops at the first chunk that is not a group of newline-terminated
    numbers; at least one group is required.
    """
    elves = []
    pos = 0
    while (match := _ELF.match(text, pos)) is not None:
        elves.append([int(value) for value in match.group(1).split()])
        pos = match.end()
    if not elves:
        raise ValueError("input holds no calorie groups")
    return elves


def solve_part_1(text):
    """Return the largest total carried by a single elf."""
    return max(sum(elf) for elf in parse_input(text))


def solve_part_2(text):
    """Return the total carried by the three best-stocked elves."""
    totals = sorted((sum(elf) for elf in parse_input(text)), reverse=True)
    return sum(totals[:3])