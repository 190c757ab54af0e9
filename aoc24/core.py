"""Shared input helpers."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

StrPath = str | PathLike[str]


def read_lines(file_path: StrPath) -> list[str]:
    """Return the lines of a text file without their line endings."""
    return Path(file_path).read_text(encoding="utf-8").splitlines()


def matrix(file_path: StrPath) -> list[list[str]]:
    """Read a file as a grid of characters, one row per line."""
    return [list(line) for line in read_lines(file_path)]