"""Day 4: word search for XMAS and crossed MAS."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from aoc24.core import StrPath, matrix

Cell = tuple[int, int]
Offsets = tuple[Cell, ...]

_LINES: tuple[Offsets, ...] = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (1, 1), (2, 2), (3, 3)),
    ((0, 0), (1, -1), (2, -2), (3, -3)),
)
_CROSS: tuple[Offsets, ...] = (
    ((-1, -1), (0, 0), (1, 1)),
    ((-1, 1), (0, 0), (1, -1)),
)


def _placements(y: int, x: int, shapes: Sequence[Offsets]) -> Iterator[list[Cell]]:
    """Yield each shape anchored at (y, x), dropping those with negative cells."""
    for offsets in shapes:
        cells = [(y + dy, x + dx) for dy, dx in offsets]
        if all(cy >= 0 and cx >= 0 for cy, cx in cells):
            yield cells


def _word(grid: list[list[str]], cells: list[Cell]) -> str | None:
    letters = []
    for y, x in cells:
        if y >= len(grid) or x >= len(grid[y]):
            return None
        letters.append(grid[y][x])
    return "".join(letters)


def _cells(grid: list[list[str]]) -> Iterator[Cell]:
    for y, row in enumerate(grid):
        for x, _ in enumerate(row):
            yield y, x


def part1(file_path: StrPath) -> int:
    """Count XMAS occurrences in any direction."""
    grid = matrix(file_path)
    return sum(
        _word(grid, cells) in ("XMAS", "SAMX")
        for y, x in _cells(grid)
        for cells in _placements(y, x, _LINES)
    )


def part2(file_path: StrPath) -> int:
    """Count MAS crosses shaped like an X."""
    grid = matrix(file_path)
    matches = 0
    for y, x in _cells(grid):
        arms = list(_placements(y, x, _CROSS))
        if len(arms) != 2:
            continue
        if all(_word(grid, arm) in ("MAS", "SAM") for arm in arms):
            matches += 1
    return matches