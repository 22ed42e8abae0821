# aoc2024

Solvers for days 1 to 8 of the 2024 Advent of Code puzzles, usable both as
command-line tools and as a small Python library. No third-party packages are
needed.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Each day has its own command. Each takes the path of the puzzle input as an
optional argument:

```
aoc2024-day1 input.txt
aoc2024-day2 input.txt
aoc2024-day3 input.txt
aoc2024-day4 input.txt
aoc2024-day5 input.txt
aoc2024-day6 input.txt
aoc2024-day7 input.txt
aoc2024-day8 input.txt
```

If the path is left out, days 1 to 4 read `input.txt` and days 5 to 8 read
`day_N/input.txt` (for example `day_5/input.txt`), relative to the current
directory. A command exits with status 1 when the input file cannot be opened.

Days 1 to 4 print the answer to one part at a time, chosen with
`--part 1` or `--part 2`; the default is part 2:

```
aoc2024-day3 --part 1 input.txt
```

Days 5, 6 and 7 print both parts. Day 8 prints part one only.

## Library

Every day lives in its own module, `aoc2024.day1` to `aoc2024.day8`, with a
parser for the puzzle text and one function per puzzle part.

| Module | Parser | Solvers |
| --- | --- | --- |
| `day1` | `parse_columns` | `total_distance`, `similarity_score` |
| `day2` | `parse_reports` | `count_safe`, `count_safe_with_dampener` (built on `is_safe`, `is_safe_with_dampener`) |
| `day3` | — | `sum_multiplications`, `sum_enabled_multiplications` |
| `day4` | `parse_grid` | `count_xmas`, `count_x_mas` |
| `day5` | `parse_manual` | `sum_ordered_middles`, `sum_reordered_middles` (with `is_ordered`, `reorder`, `middle_value`) |
| `day6` | `parse_map` | `count_visited`, `count_loop_obstructions` (with `walk`) |
| `day7` | `parse_equations` | `solve_with_add_mul`, `solve_with_concat` (with `concat`) |
| `day8` | `parse_map` | `count_antinodes` (with `antenna_positions`) |

Parsers raise `ValueError` on lines they cannot read, and `day6.parse_map`
raises it when the map has no guard (`^`).

For example, day 3 works straight on the raw text:

```python
from aoc2024.day3 import sum_multiplications, sum_enabled_multiplications

memory = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
print(sum_multiplications(memory))          # 161
print(sum_enabled_multiplications(memory))  # 48
```

Day 7 reports whether an equation can be made true; summing the targets is up
to the caller:

```python
from aoc2024.day7 import parse_equations, solve_with_add_mul

equations = parse_equations("190: 10 19\n83: 17 5\n")
print(sum(t for t, nums in equations if solve_with_add_mul(t, nums)))  # 190
```

## What it does not do

- Day 8 covers part one only: `count_antinodes` counts the antinodes that lie
  twice as far from one antenna as from another of the same frequency. The
  part-two rule, where antinodes fall at every grid position in line with two
  antennas, is not implemented, and `aoc2024-day8` prints no part-two answer.
- Only days 1 to 8 are included.