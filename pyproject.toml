[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc24"
version = "0.1.0"
description = "Solutions to the first four Advent of Code 2024 puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2024"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc24 = "aoc24.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc24"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
