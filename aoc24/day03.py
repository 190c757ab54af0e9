"""Day 3: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import re
from pathlib import Path

from aoc24.core import StrPath

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)")


def part1(file_path: StrPath) -> int:
    """Sum every mul(a,b) product in the file."""
    content = Path(file_path).read_text(encoding="utf-8")
    return sum(int(a) * int(b) for a, b in _MUL.findall(content))


def part2(file_path: StrPath) -> int:
    """Sum mul(a,b) products, honouring do() and don't() switches."""
    content = Path(file_path).read_text(encoding="utf-8")
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(content):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total