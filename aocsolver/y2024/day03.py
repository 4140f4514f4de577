"""Mull it over: sum multiplications in corrupted memory."""

import re

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"(don't\(\))|(do\(\))|(mul\((\d+),(\d+)\))")


def solve_part_1(text):
    """Sum of every mul(a,b) product."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def solve_part_2(text):
    """Sum of mul(a,b) products, skipping those after don't() until do()."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(text):
        if match[1] is not None:
            enabled = False
        elif match[2] is not None:
            enabled = True
        elif enabled:
            total += int(match[4]) * int(match[5])
    return total