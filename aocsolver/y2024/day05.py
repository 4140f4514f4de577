"""Print queue: check and repair page update orderings."""

import re
from dataclasses import dataclass
from itertools import combinations

_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass
class PrintQueue:
    """Ordering rules and the page updates to check against them."""

    page_numbers_with_rules: set
    rules: set
    updates: list


def _number(value, what):
    if not _NUMBER.fullmatch(value):
        raise ValueError(f"{what} must be a number: {value!r}")
    return int(value)


def _rule(line):
    parts = line.split("|")
    if len(parts) < 2:
        raise ValueError(f"rule must have two parts: {line!r}")
    return (
        _number(parts[0], "first part of the rule"),
        _number(parts[1], "second part of the rule"),
    )


def _pages(line):
    return [_number(page, "page number") for page in line.split(",")]


def parse_input(text):
    """Parse 'a|b' rules, a blank line, then comma separated updates."""
    parts = text.split("\n\n")
    if len(parts) < 2:
        raise ValueError("input must contain rules and updates")
    rules = {_rule(line) for line in parts[0].splitlines()}
    pages = {page for rule in rules for page in rule}
    updates = [_pages(line) for line in parts[1].splitlines()]
    return PrintQueue(pages, rules, updates)


def _misordered(queue, a, b):
    return (
        a in queue.page_numbers_with_rules
        and b in queue.page_numbers_with_rules
        and (b, a) in queue.rules
    )


def solve_part_1(text):
    """Sum of middle pages of the updates already in correct order."""
    queue = parse_input(text)
    return sum(
        update[len(update) // 2]
        for update in queue.updates
        if not any(_misordered(queue, a, b) for a, b in combinations(update, 2))
    )


def solve_part_2(text):
    """Sum of middle pages of the misordered updates once they are reordered."""
    queue = parse_input(text)
    total = 0
    for update in queue.updates:
        incorrect = False
        for i, j in combinations(range(len(update)), 2):
            a, b = update[i], update[j]
            if _misordered(queue, a, b):
                incorrect = True
                update[i], update[j] = b, a
        if incorrect:
            total += update[len(update) // 2]
    return total