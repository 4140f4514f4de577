"""Solutions to the 2024 puzzles."""

__all__ = ["day01", "day02", "day03", "day04", "day05", "day06"]