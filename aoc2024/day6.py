"""Day 6: follow the lab guard's patrol route."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

Cell = tuple[int, int]

# Up, right, down, left: the guard turns right in this order.
_DIRECTIONS: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
_OBSTACLE = "#"
_GUARD = "^"


def parse_map(text: str) -> tuple[list[str], Cell]:
    """The map rows and the guard's starting cell."""
    grid = [line for line in text.splitlines() if line]
    for row, line in enumerate(grid):
        col = line.find(_GUARD)
        if col >= 0:
            return grid, (row, col)
    raise ValueError("the map has no guard")


def _patrol(grid: Sequence[str], start: Cell, extra: Cell | None = None) -> tuple[set[Cell], bool]:
    row, col = start
    heading = 0
    visited = {start}
    seen = {(row, col, heading)}
    while True:
        dr, dc = _DIRECTIONS[heading]
        nr, nc = row + dr, col + dc
        if not (0 <= nr < len(grid) and 0 <= nc < len(grid[nr])):
            return visited, False
        if grid[nr][nc] == _OBSTACLE or (nr, nc) == extra:
            heading = (heading + 1) % len(_DIRECTIONS)
        else:
            row, col = nr, nc
            visited.add((row, col))
        state = (row, col, heading)
        if state in seen:
            return visited, True
        seen.add(state)


def walk(grid: Sequence[str], start: Cell) -> tuple[set[Cell], bool]:
    """Cells the guard visits, and whether the patrol loops forever."""
    return _patrol(grid, start)


def count_visited(grid: Sequence[str], start: Cell) -> int:
    """Number of distinct cells the guard stands on before leaving."""
    visited, _ = _patrol(grid, start)
    return len(visited)


def count_loop_obstructions(grid: Sequence[str], start: Cell) -> int:
    """Number of cells where one new obstacle traps the guard in a loop."""
    visited, _ = _patrol(grid, start)
    return sum(
        1 for cell in visited - {start} if _patrol(grid, start, extra=cell)[1]
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Guard gallivant.")
    parser.add_argument("path", nargs="?", default="day_6/input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            grid, start = parse_map(handle.read())
    except OSError:
        return 1
    print(f"Part one result : {count_visited(grid, start)} ")
    print(f"Part two result : {count_loop_obstructions(grid, start)} ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())