"""Camp cleanup: overlapping section assignments."""

import re
from dataclasses import dataclass

_LINE = re.compile(r"(\d+)-(\d+),(\d+)-(\d+)\r?\n")


@dataclass(frozen=True)
class SectionRange:
    """An inclusive range of section ids."""

    left: int
    right: int

    def overlaps(self, other):
        """Return True when the two ranges share any section."""
        return (
            other.left <= self.left <= other.right
            or other.left <= self.right <= other.right
            or self.left <= other.left <= self.right
            or self.left <= other.right <= self.right
        )

    def contains(self, other):
        """Return True when this range fully contains the other."""
        return self.left <= other.left and other.right <= self.right


def parse_input(text):
    """Parse lines of 'a-b,c-d' into pairs of ranges."""
    pairs = []
    pos = 0
    while (match := _LINE.match(text, pos)) is not None:
        a, b, c, d = (int(group) for group in match.groups())
        pairs.append((SectionRange(a, b), SectionRange(c, d)))
        pos = match.end()
    if not pairs:
        raise ValueError("input holds no assignment pairs")
    return pairs


def solve_part_1(text):
    """Count pairs where one range fully contains the other."""
    return sum(
        1 for left, right in parse_input(text) if left.contains(right) or right.contains(left)
    )


def solve_part_2(text):
    """Count pairs whose ranges overlap at all."""
    return sum(1 for left, right in parse_input(text) if left.overlaps(right))