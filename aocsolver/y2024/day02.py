"""Red-nosed reports: safe level sequences."""

import re

_NUMBER = re.compile(r"\+?[0-9]+")
_INCREASING = frozenset({1, 2, 3})
_DECREASING = frozenset({-1, -2, -3})


def _number(value):
    if not _NUMBER.fullmatch(value):
        raise ValueError(f"levels should be numbers: {value!r}")
    return int(value)


def parse(text):
    """Parse space separated levels, one report per line."""
    return [[_number(value) for value in line.split(" ")] for line in text.splitlines()]


def level_differences(report):
    """Differences a - b between each level and the next."""
    return [a - b for a, b in zip(report, report[1:])]


def is_safe(differences):
    """All steps are 1-3 in the same direction."""
    return all(d in _DECREASING for d in differences) or all(
        d in _INCREASING for d in differences
    )


def solve_part_1(reports):
    """Count safe reports."""
    return sum(1 for report in reports if is_safe(level_differences(report)))


def _variants(report):
    yield report
    for index in range(len(report)):
        yield report[:index] + report[index + 1:]


def solve_part_2(reports):
    """Count reports that are safe with at most one level removed."""
    return sum(
        1
        for report in reports
        if any(is_safe(level_differences(variant)) for variant in _variants(report))
    )