import pytest

from aoc2024.day6 import count_loop_obstructions, count_visited, parse_map, walk

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


@pytest.fixture
def example():
    return parse_map(EXAMPLE)


def test_parse_map_finds_guard(example):
    grid, (row, col) = example
    assert grid[row][col] == "^"
    assert len(grid) == len(EXAMPLE.splitlines())


def test_parse_map_without_guard_raises():
    with pytest.raises(ValueError):
        parse_map("...\n.#.\n...\n")


def test_count_visited_example(example):
    grid, start = example
    assert count_visited(grid, start) == 41


def test_count_loop_obstructions_example(example):
    grid, start = example
    assert count_loop_obstructions(grid, start) == 6


def test_walk_example_leaves_map(example):
    grid, start = example
    visited, loops = walk(grid, start)
    assert loops is False
    assert start in visited
    assert len(visited) == count_visited(grid, start)
    assert all(grid[r][c] != "#" for r, c in visited)


def test_walk_straight_up_visits_column_only():
    grid, start = parse_map("...\n...\n.^.\n")
    visited, loops = walk(grid, start)
    assert loops is False
    assert visited == {(0, 1), (1, 1), (2, 1)}


def test_walk_boxed_in_guard_loops():
    grid, start = parse_map(".#.\n#^#\n.#.\n")
    visited, loops = walk(grid, start)
    assert loops is True
    assert visited == {start}


def test_obstructions_bounded_by_visited(example):
    grid, start = example
    assert count_loop_obstructions(grid, start) <= count_visited(grid, start) - 1