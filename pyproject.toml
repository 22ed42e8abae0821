[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2024"
version = "0.1.0"
description = "Solvers for days 1 to 8 of the 2024 Advent of Code puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2024"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2024-day1 = "aoc2024.day1:main"
aoc2024-day2 = "aoc2024.day2:main"
aoc2024-day3 = "aoc2024.day3:main"
aoc2024-day4 = "aoc2024.day4:main"
aoc2024-day5 = "aoc2024.day5:main"
aoc2024-day6 = "aoc2024.day6:main"
aoc2024-day7 = "aoc2024.day7:main"
aoc2024-day8 = "aoc2024.day8:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2024"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
