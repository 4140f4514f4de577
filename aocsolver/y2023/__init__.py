"""Solutions to the 2023 puzzles."""

__all__ = ["day01"]