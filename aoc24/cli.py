"""Command line entry point that solves the puzzles from an assets directory."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from aoc24 import day01, day02, day03

DEFAULT_ASSETS = Path("../assets/aoc24")

_SOLVERS: tuple[tuple[str, Callable[[Path], int], Callable[[Path], int]], ...] = (
    ("day01", day01.part1, day01.part2),
    ("day02", day02.part1, day02.part2),
    ("day03", day03.part1, day03.part2),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve each day's input.txt under the assets directory and print the answers."""
    parser = argparse.ArgumentParser(prog="aoc24", description=__doc__)
    parser.add_argument(
        "assets",
        nargs="?",
        type=Path,
        default=DEFAULT_ASSETS,
        help="directory holding dayNN/input.txt files",
    )
    args = parser.parse_args(argv)

    try:
        for day, first, second in _SOLVERS:
            input_path = args.assets / day / "input.txt"
            print(f"{day} part1: {first(input_path)}")
            print(f"{day} part2: {second(input_path)}")
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())