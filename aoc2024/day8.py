"""Day 8: locate antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Sequence
from itertools import permutations

Cell = tuple[int, int]
_EMPTY = "."


def parse_map(text: str) -> list[str]:
    """Rows of the antenna map, without blank lines."""
    return [line for line in text.splitlines() if line]


def antenna_positions(grid: Sequence[str]) -> dict[str, list[Cell]]:
    """Antenna cells grouped by frequency, in reading order."""
    positions: dict[str, list[Cell]] = defaultdict(list)
    for row, line in enumerate(grid):
        for col, symbol in enumerate(line):
            if symbol != _EMPTY:
                positions[symbol].append((row, col))
    return dict(positions)


def count_antinodes(grid: Sequence[str]) -> int:
    """Distinct in-map cells that lie twice as far from one antenna as from another of its frequency."""
    height = len(grid)
    antinodes: set[Cell] = set()
    for cells in antenna_positions(grid).values():
        for (ar, ac), (br, bc) in permutations(cells, 2):
            row, col = 2 * ar - br, 2 * ac - bc
            if 0 <= row < height and 0 <= col < len(grid[row]):
                antinodes.add((row, col))
    return len(antinodes)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resonant collinearity.")
    parser.add_argument("path", nargs="?", default="day_8/input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            grid = parse_map(handle.read())
    except OSError:
        return 1
    print(f"Part one result: {count_antinodes(grid)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())