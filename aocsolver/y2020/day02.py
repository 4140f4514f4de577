"""Password philosophy: validate passwords against their policies."""

import re

_POLICY = re.compile(r"(\d+)-(\d+) (\w): (\w+)")


def part_1_is_password_valid(min_count, max_count, char, password):
    """The letter must appear between min_count and max_count times."""
    return min_count <= password.count(char) <= max_count


def part_2_is_password_valid(first_pos, second_pos, char, password):
    """Exactly one of the 1-based positions must hold the letter."""
    matches = sum(
        1
        for index, letter in enumerate(password, 1)
        if index in (first_pos, second_pos) and letter == char
    )
    return matches == 1


def _count_valid(text, validator):
    return sum(
        1
        for match in _POLICY.finditer(text)
        if validator(int(match[1]), int(match[2]), match[3], match[4])
    )


def solve_part_1(text):
    """Count passwords valid under the occurrence-count policy."""
    return _count_valid(text, part_1_is_password_valid)


def solve_part_2(text):
    """Count passwords valid under the position policy."""
    return _count_valid(text, part_2_is_password_valid)