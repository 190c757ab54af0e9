"""Advent of Code 2024 puzzle solutions for days 1 to 4, with a command for days 1 to 3."""

__version__ = "0.1.0"
__all__ = ["core", "day01", "day02", "day03", "day04", "cli"]