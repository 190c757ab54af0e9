import pytest

from aoc24 import day02

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


@pytest.fixture
def example(tmp_path):
    path = tmp_path / "example.txt"
    path.write_text(EXAMPLE)
    return path


def test_part1(example):
    assert day02.part1(example) == 2


def test_part2(example):
    assert day02.part2(example) == 4


def test_part2_at_least_part1(example):
    assert day02.part2(example) >= day02.part1(example)


def test_equal_levels_are_unsafe(tmp_path):
    path = tmp_path / "flat.txt"
    path.write_text("5 5 5\n")
    assert day02.part1(path) == 0
    assert day02.part2(path) == 0


def test_non_numeric_level(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 x 3\n")
    with pytest.raises(ValueError):
        day02.part1(path)