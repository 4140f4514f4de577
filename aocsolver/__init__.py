"""Advent of Code puzzle solutions, grouped by year, with a command for 2022."""

__version__ = "0.1.0"