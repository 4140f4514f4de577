"""Command line entry point: solve a puzzle day from input on stdin."""

import argparse
import sys

from aocsolver.y2022 import day01, day02, day03, day04

_SOLVERS = {
    (2022, 1): day01,
    (2022, 2): day02,
    (2022, 3): day03,
    (2022, 4): day04,
}


def solve(year, day, text):
    """Return (part 1, part 2) solutions for the given puzzle day."""
    try:
        module = _SOLVERS[(year, day)]
    except KeyError:
        raise ValueError(f"Not solved yet: {year} day {day}") from None
    return module.solve_part_1(text), module.solve_part_2(text)


def main(argv=None):
    """Read puzzle input from stdin and print both solutions."""
    parser = argparse.ArgumentParser(
        prog="aocsolver", description="Solve a puzzle day reading its input from stdin."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    args = parser.parse_args(argv)

    text = sys.stdin.read()
    try:
        part_1, part_2 = solve(args.year, args.day, text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(part_1)
    print(part_2)
    return 0


if __name__ == "__main__":
    sys.exit(main())