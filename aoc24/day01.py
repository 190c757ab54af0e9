"""Day 1: comparing two location lists."""

from __future__ import annotations

from collections import Counter

from aoc24.core import StrPath, read_lines


def _columns(file_path: StrPath) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in read_lines(file_path):
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected two numbers, got {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part1(file_path: StrPath) -> int:
    """Sum of distances between the sorted left and right lists."""
    left, right = _columns(file_path)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(file_path: StrPath) -> int:
    """Similarity score: each left value times its count in the right list."""
    left, right = _columns(file_path)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)