"""Inventory management: checksum and common letters of box ids."""

from collections import Counter
from dataclasses import dataclass, field
from itertools import combinations
from math import prod

_N_APPEARANCES = (2, 3)


def word_histogram(word):
    """Map each letter of the word to the number of times it occurs."""
    return dict(Counter(word))


def _check_lengths(first, second):
    if len(first) != len(second):
        raise ValueError("both words must be of the same length")


def difference(first, second):
    """Number of positions at which the two words differ."""
    _check_lengths(first, second)
    return sum(1 for a, b in zip(first, second) if a != b)


def common(first, second):
    """The letters that match position by position in both words."""
    _check_lengths(first, second)
    return "".join(a for a, b in zip(first, second) if a == b)


def _differing_by_n(words, n):
    found = []
    for first, second in combinations(words, 2):
        if difference(first, second) == n:
            for word in (first, second):
                if word not in found:
                    found.append(word)
    return found


@dataclass
class Warehouse:
    """A warehouse holding boxes identified by id strings."""

    boxes_id: list = field(default_factory=list)

    @classmethod
    def from_text(cls, text):
        """One box id per line."""
        return cls(text.splitlines())

    @classmethod
    def from_file(cls, path):
        """Read box ids from a file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_text(handle.read())

    def checksum(self):
        """Product of the counts of ids with a letter exactly twice and thrice."""
        occurrences = Counter()
        for box_id in self.boxes_id:
            counts = set(word_histogram(box_id).values())
            for n in _N_APPEARANCES:
                if n in counts:
                    occurrences[n] += 1
        return prod(occurrences.values())

    def common_letters(self):
        """Common letters of the first two ids that differ by one letter."""
        candidates = _differing_by_n(self.boxes_id, 1)
        if len(candidates) < 2:
            raise ValueError("no two box ids differ by exactly one letter")
        return common(candidates[0], candidates[1])