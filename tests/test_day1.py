import random

import pytest

from aoc2024.day1 import main, parse_columns, similarity_score, total_distance

EXAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3
"""


def test_parse_columns_reads_both_columns():
    left, right = parse_columns("1 2\n\n30   40\n")
    assert left == [1, 30]
    assert right == [2, 40]


def test_parse_columns_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_columns("1 2 3\n")


def test_example_distance():
    left, right = parse_columns(EXAMPLE)
    assert total_distance(left, right) == 11


def test_example_similarity():
    left, right = parse_columns(EXAMPLE)
    assert similarity_score(left, right) == 31


def test_distance_of_identical_columns_is_zero():
    values = [5, 1, 9, 3]
    assert total_distance(values, list(reversed(values))) == 0


def test_distance_ignores_input_order():
    left, right = parse_columns(EXAMPLE)
    shuffled_left = left[:]
    shuffled_right = right[:]
    random.Random(7).shuffle(shuffled_left)
    random.Random(11).shuffle(shuffled_right)
    assert total_distance(shuffled_left, shuffled_right) == total_distance(left, right)


def test_distance_is_symmetric():
    left, right = parse_columns(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_distance_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_similarity_with_no_shared_values():
    assert similarity_score([1, 2, 3], [4, 5, 6]) == similarity_score([], [4, 5, 6])


def test_similarity_counts_repeats():
    assert similarity_score([7], [7, 7, 7]) == 7 * 3


def test_main_prints_similarity(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    left, right = parse_columns(EXAMPLE)
    assert capsys.readouterr().out.strip() == str(similarity_score(left, right))


def test_main_part_one_prints_distance(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path), "--part", "1"]) == 0
    left, right = parse_columns(EXAMPLE)
    assert capsys.readouterr().out.strip() == str(total_distance(left, right))


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1