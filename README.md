# aoc24

Solutions to days 1 to 4 of Advent of Code 2024. Each day has two parts. Each part reads a puzzle input file and returns its answer as an integer.

## Installation

```
pip install .
```

Add the `test` extra to get the test suite's requirements:

```
pip install ".[test]"
```

## Command line

```
aoc24 [ASSETS]
```

The command solves both parts of days 1, 2 and 3 and prints each answer, one per line, in the form `day01 part1: <answer>`. It reads `ASSETS/dayNN/input.txt` for each day. If `ASSETS` is not given, it uses `../assets/aoc24`, relative to the current directory.

If an input file is missing or cannot be read, the command prints `error: ...` to standard error and exits with status 1. Otherwise it exits with status 0.

## Library use

```python
from aoc24 import day01, day02, day03, day04
from aoc24.core import matrix, read_lines

day01.part1("assets/aoc24/day01/input.txt")  # total distance between the sorted lists
day01.part2("assets/aoc24/day01/input.txt")  # similarity score
day02.part1("assets/aoc24/day02/input.txt")  # number of safe reports
day02.part2("assets/aoc24/day02/input.txt")  # safe reports, allowing one level to be removed
day03.part1("assets/aoc24/day03/input.txt")  # sum of all mul(a,b) products
day03.part2("assets/aoc24/day03/input.txt")  # sum of the products that do()/don't() leave enabled
day04.part1("assets/aoc24/day04/input.txt")  # XMAS occurrences in any direction
day04.part2("assets/aoc24/day04/input.txt")  # X-shaped MAS occurrences

lines = read_lines("assets/aoc24/day04/example.txt")  # lines without their line endings
grid = matrix("assets/aoc24/day04/example.txt")       # file as a list of character lists
```

Every function takes a path to a text file, as a string or a path-like object, and reads it as UTF-8.

- A missing or unreadable file raises `OSError`.
- Input that cannot be parsed raises `ValueError`. This includes a non-numeric field, or a day 1 line that has fewer than two numbers.

## What it does not do

The `aoc24` command does not run day 4. Call `day04.part1` and `day04.part2` from Python to solve it.

The package does not download puzzle inputs. The input files must already be on disk.