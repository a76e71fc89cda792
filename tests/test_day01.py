import pytest

from advent2024.day01 import parse_input, parse_line, part1, part2


def test_parse_line():
    assert parse_line("1 2") == (1, 2)
    assert parse_line("1   2") == (1, 2)


def test_parse_line_negative():
    assert parse_line("-3 4") == (-3, 4)


def test_parse_input():
    assert parse_input("1 2\n3 4") == [(1, 2), (3, 4)]


def test_parse_input_trailing_newline():
    assert parse_input("1 2\n3 4\n") == [(1, 2), (3, 4)]


def test_parse_input_rejects_garbage():
    with pytest.raises(ValueError):
        parse_input("abc")


def test_part1_identical_columns_is_zero():
    assert part1("5 5\n1 1\n9 9") == 0


def test_part1_pairs_sorted_values():
    assert part1("1 3\n2 1") == 1


def test_part2_no_matches_is_zero():
    assert part2("1 2\n3 4") == 0


def test_part2_counts_repeats():
    assert part2("3 3\n4 3") == 6