"""Trebuchet calibration values."""

_DIGITS = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "1", "2", "3", "4", "5", "6", "7", "8", "9",
)
_VALUES = {word: index % 9 + 1 for index, word in enumerate(_DIGITS)}


def _lines(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def solve_part_1(text):
    """Sum first and last numeric digits of every line."""
    total = 0
    for line in _lines(text):
        digits = [int(c) for c in line if c in "0123456789"]
        if not digits:
            raise ValueError(f"line holds no digit: {line!r}")
        total += digits[0] * 10 + digits[-1]
    return total


def _digits_in(line):
    for i in range(len(line)):
        for word in _DIGITS:
            if line.startswith(word, i):
                yield _VALUES[word]


def solve_part_2(text):
    """Sum first and last digits of every line, spelled-out digits included."""
    total = 0
    for line in _lines(text):
        values = list(_digits_in(line))
        if not values:
            raise ValueError(f"line holds no digit: {line!r}")
        total += values[0] * 10 + values[-1]
    return total