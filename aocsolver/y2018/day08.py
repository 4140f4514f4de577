"""Memory maneuver: a license tree of nodes with metadata."""

import re
from dataclasses import dataclass, field

_NUMBER = re.compile(r"\+?[0-9]+")


def parse(text):
    """Parse whitespace separated byte values."""
    data = []
    for token in text.split():
        if not _NUMBER.fullmatch(token) or int(token) > 255:
            raise ValueError(f"not a byte value: {token!r}")
        data.append(int(token))
    return data


@dataclass
class Node:
    """A tree node with child nodes and metadata entries."""

    children: list = field(default_factory=list)
    metadata: list = field(default_factory=list)

    @classmethod
    def from_data(cls, data):
        """Build the tree from a header-first sequence of numbers."""
        values = iter(data)
        try:
            return cls._build(values)
        except StopIteration:
            raise ValueError("data ends before the tree is complete") from None

    @classmethod
    def _build(cls, values):
        n_children = next(values)
        n_metadata = next(values)
        children = [cls._build(values) for _ in range(n_children)]
        metadata = [next(values) for _ in range(n_metadata)]
        return cls(children, metadata)

    def metadata_sum(self):
        """Sum of all metadata entries in the tree."""
        return sum(self.metadata) + sum(child.metadata_sum() for child in self.children)

    def value(self):
        """Metadata sum for a leaf; otherwise the sum of the referenced children."""
        if not self.children:
            return sum(self.metadata)
        return sum(
            self.children[index - 1].value()
            for index in self.metadata
            if 0 < index <= len(self.children)
        )