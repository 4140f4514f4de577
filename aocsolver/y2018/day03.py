"""No matter how you slice it: overlapping fabric claims."""

import re
from collections import Counter
from dataclasses import dataclass, field

WIDTH = 1000
HEIGHT = 1000

_CLAIM = re.compile(r"#([0-9]+) @ ([0-9]+),([0-9]+): ([0-9]+)x([0-9]+)")


@dataclass(frozen=True)
class Claim:
    """A rectangular claim on the fabric."""

    id: int
    left_margin: int
    top_margin: int
    width: int
    height: int

    def positions(self):
        """Every (x, y) square inch of the claim, row by row."""
        return [
            (x, y)
            for y in range(self.top_margin, self.top_margin + self.height)
            for x in range(self.left_margin, self.left_margin + self.width)
        ]


def parse_claims(text):
    """Parse lines of the form '#id @ left,top: WxH'."""
    return [
        Claim(*(int(group) for group in match.groups()))
        for match in _CLAIM.finditer(text)
    ]


@dataclass
class Fabric:
    """A sheet of fabric with claims laid on it."""

    claims: list = field(default_factory=list)
    width: int = WIDTH
    height: int = HEIGHT

    def _claim_counts(self):
        counts = Counter()
        for claim in self.claims:
            for x, y in claim.positions():
                if not (0 <= x < self.width and 0 <= y < self.height):
                    raise ValueError(f"claim #{claim.id} lies outside the fabric")
                counts[(x, y)] += 1
        return counts

    def overlap_size(self, n):
        """Number of square inches covered by at least n claims."""
        counts = self._claim_counts()
        uncovered = self.width * self.height - len(counts)
        covered = sum(1 for count in counts.values() if count >= n)
        return covered + (uncovered if n <= 0 else 0)

    def non_overlapping_claim(self):
        """The first claim that no other claim overlaps, or None."""
        counts = self._claim_counts()
        for claim in self.claims:
            if all(counts[position] == 1 for position in claim.positions()):
                return claim
        return None