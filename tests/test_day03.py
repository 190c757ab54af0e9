import pytest

from aoc24 import day03

EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))\n"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))\n"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_part1(tmp_path):
    assert day03.part1(_write(tmp_path, "example.txt", EXAMPLE)) == 161


def test_part2(tmp_path):
    assert day03.part2(_write(tmp_path, "example2.txt", EXAMPLE2)) == 48


def test_part2_without_switches_matches_part1(tmp_path):
    path = _write(tmp_path, "example.txt", EXAMPLE)
    assert day03.part2(path) == day03.part1(path)


def test_no_instructions(tmp_path):
    path = _write(tmp_path, "none.txt", "mul(1, 2) mul[3,4]")
    assert day03.part1(path) == 0


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        day03.part1(tmp_path / "missing.txt")