"""Day 4: word search for XMAS and crossed MAS."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_DIRECTIONS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]
_PAIR = {"M", "S"}


def parse_grid(text: str) -> list[str]:
    """Rows of the word search, without blank lines."""
    return [line for line in text.splitlines() if line]


def _at(grid: Sequence[str], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def count_xmas(grid: Sequence[str]) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    count = 0
    for r, line in enumerate(grid):
        for c, letter in enumerate(line):
            if letter != "X":
                continue
            for dr, dc in _DIRECTIONS:
                if all(
                    _at(grid, r + dr * step, c + dc * step) == expected
                    for step, expected in enumerate("MAS", start=1)
                ):
                    count += 1
    return count


def count_x_mas(grid: Sequence[str]) -> int:
    """Occurrences of two MAS crossing diagonally on a shared A."""
    count = 0
    for r, line in enumerate(grid):
        for c, letter in enumerate(line):
            if letter != "A":
                continue
            falling = {_at(grid, r - 1, c - 1), _at(grid, r + 1, c + 1)}
            rising = {_at(grid, r - 1, c + 1), _at(grid, r + 1, c - 1)}
            if falling == _PAIR and rising == _PAIR:
                count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ceres search.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            grid = parse_grid(handle.read())
    except OSError:
        return 1
    if args.part == 1:
        print(f"Part one result : {count_xmas(grid)}")
    else:
        print(f"Part two result : {count_x_mas(grid)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())