"""Custom customs: count yes answers per group."""

from collections import Counter


def _groups(text):
    return text.split("\n\n")


def count_unanimous(answers):
    """Count questions answered yes by every person in the group."""
    people = len(answers)
    counts = Counter("".join(answers).replace("\n", ""))
    return sum(1 for count in counts.values() if count == people)


def solve_part_1(text):
    """Sum over groups of questions anyone answered yes."""
    return sum(len(set(group.replace("\n", ""))) for group in _groups(text))


def solve_part_2(text):
    """Sum over groups of questions everyone answered yes."""
    return sum(count_unanimous(group.splitlines()) for group in _groups(text))