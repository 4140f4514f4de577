"""Crossed wires: closest intersection of two wires."""

import re

_LENGTH = re.compile(r"[+-]?[0-9]+")
_STEPS = {"L": (-1, 0), "D": (0, -1), "U": (0, 1), "R": (1, 0)}


def parse_line(line):
    """Parse 'R8,U5,...' into (direction, length) pairs."""
    moves = []
    for part in line.split(","):
        direction, length = part[:1], part[1:]
        if not direction or not _LENGTH.fullmatch(length):
            raise ValueError(f"malformed move: {part!r}")
        moves.append((direction, int(length)))
    return moves


def trace_wire(moves):
    """Map each visited point to the wire length at which it was last reached."""
    points = {}
    x = y = steps = 0
    for direction, length in moves:
        try:
            dx, dy = _STEPS[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        for _ in range(length):
            x, y = x + dx, y + dy
            steps += 1
            points[(x, y)] = steps
    return points


def _manhattan(point):
    return abs(point[0]) + abs(point[1])


def solve(text):
    """Return (distance to closest intersection, least combined wire length)."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("input needs two wires")
    a = trace_wire(parse_line(lines[0]))
    b = trace_wire(parse_line(lines[1]))
    crossings = a.keys() & b.keys()
    if not crossings:
        raise ValueError("wires do not cross")
    min_dist = min(_manhattan(point) for point in crossings)
    min_length = min(a[point] + b[point] for point in crossings)
    return min_dist, min_length