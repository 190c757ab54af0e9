"""Day 2: checking reactor reports for safety."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import pairwise

from aoc24.core import StrPath, read_lines


def _reports(file_path: StrPath) -> Iterator[list[int]]:
    for line in read_lines(file_path):
        yield [int(field) for field in line.split()]


def _is_safe(levels: Sequence[int]) -> bool:
    increasing: bool | None = None
    for a, b in pairwise(levels):
        step_increasing = a < b
        if increasing is None:
            increasing = step_increasing
        if not 1 <= abs(a - b) <= 3 or step_increasing != increasing:
            return False
    return True


def _is_safe_with_dampener(levels: Sequence[int]) -> bool:
    return any(
        _is_safe([*levels[:skip], *levels[skip + 1 :]]) for skip in range(len(levels))
    )


def part1(file_path: StrPath) -> int:
    """Count reports that are strictly monotonic with steps of 1 to 3."""
    return sum(_is_safe(report) for report in _reports(file_path))


def part2(file_path: StrPath) -> int:
    """Count reports that become safe after removing at most one level."""
    return sum(_is_safe_with_dampener(report) for report in _reports(file_path))