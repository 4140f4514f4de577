"""Solutions to the 2019 puzzles."""

__all__ = ["day03"]