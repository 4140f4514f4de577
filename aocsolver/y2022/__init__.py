"""Solutions to the 2022 puzzles."""

__all__ = ["day01", "day02", "day03", "day04"]