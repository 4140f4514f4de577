"""Chronal calibration: sum frequency changes and find the first repeat."""

import re
from dataclasses import dataclass, field
from itertools import cycle

_CHANGE = re.compile(r"[+-]?[0-9]+")


@dataclass
class Device:
    """A device holding a list of frequency changes."""

    frequencies: list = field(default_factory=list)

    @classmethod
    def from_text(cls, text):
        """Parse one signed change per line; trailing commas are ignored."""
        frequencies = []
        for line in text.splitlines():
            value = line.rstrip(",")
            if not _CHANGE.fullmatch(value):
                raise ValueError(
                    f"could not read frequency change: {line!r}"
                )
            frequencies.append(int(value))
        return cls(frequencies)

    @classmethod
    def from_file(cls, path):
        """Read frequency changes from a file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_text(handle.read())

    def resulting_frequency(self):
        """Frequency after applying every change once."""
        return sum(self.frequencies)

    def first_repeated(self):
        """First frequency reached twice while the changes repeat endlessly.

        The starting frequency is not counted as reached.
        """
        current = 0
        reached = set()
        for change in cycle(self.frequencies):
            current += change
            if current in reached:
                break
            reached.add(current)
        return current