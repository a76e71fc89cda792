import pytest

from advent2024.day02 import is_safe, parse_input, parse_line, part1, part2


def test_parse_line():
    assert parse_line("1 2") == [1, 2]
    assert parse_line("1   2") == [1, 2]


def test_parse_input():
    assert parse_input("1 2\n3 4") == [[1, 2], [3, 4]]


def test_parse_input_rejects_garbage():
    with pytest.raises(ValueError):
        parse_input("x y")


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([5], True),
        ([], True),
    ],
)
def test_is_safe(report, expected):
    assert is_safe(report) is expected


def test_part1():
    assert part1("7 6 4 2 1\n1 2 7 8 9\n1 3 6 7 9") == 2


def test_part2_dampener_rescues_one_bad_level():
    assert part2("1 3 2 4 5\n8 6 4 4 1\n1 2 7 8 9") == 2


def test_part2_at_least_part1():
    text = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5"
    assert part2(text) >= part1(text)