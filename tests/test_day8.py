from aoc2024.day8 import antenna_positions, count_antinodes, parse_map

EXAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def test_parse_map_drops_blank_lines():
    grid = parse_map("..a\n\n.a.\n")
    assert grid == ["..a", ".a."]


def test_antenna_positions_point_at_their_symbol():
    grid = parse_map(EXAMPLE)
    positions = antenna_positions(grid)
    assert set(positions) == {"0", "A"}
    for frequency, cells in positions.items():
        assert all(grid[r][c] == frequency for r, c in cells)
    assert positions["0"][0] == (1, 8)


def test_antenna_positions_reading_order():
    positions = antenna_positions(parse_map(EXAMPLE))
    for cells in positions.values():
        assert cells == sorted(cells)


def test_count_antinodes_example():
    assert count_antinodes(parse_map(EXAMPLE)) == 14


def test_empty_map_has_no_antinodes():
    assert count_antinodes(parse_map(".....\n.....\n")) == 0


def test_distinct_frequencies_do_not_pair():
    grid = parse_map(".....\n.a...\n..b..\n.....\n")
    assert count_antinodes(grid) == count_antinodes(parse_map(".....\n.a...\n.....\n.....\n"))


def test_pair_antinodes_inside_map():
    grid = parse_map("....\n.a..\n..a.\n....\n")
    # Antinodes fall on (0, 0) and (3, 3), both inside.
    assert count_antinodes(grid) == 2