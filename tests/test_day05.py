import pytest

from advent2024.day05 import (
    page_before_map,
    parse_input,
    parse_page_list,
    parse_page_order,
    part1,
    part2,
)

SAMPLE = "1|2\n2|3\n1|3\n\n1,2,3\n3,2,1\n1,3"


def test_parse_page_order():
    assert parse_page_order("1|2") == (1, 2)


def test_parse_page_list():
    assert parse_page_list("1,2,41") == [1, 2, 41]


def test_parse_input():
    text = "\n".join(["1|2", "3|4", "", "1,2,3,4", "4,3,2,1"])
    orders, lists = parse_input(text)
    assert orders == [(1, 2), (3, 4)]
    assert lists == [[1, 2, 3, 4], [4, 3, 2, 1]]


def test_parse_input_rejects_missing_lists():
    with pytest.raises(ValueError):
        parse_input("1|2\n3|4")


def test_page_before_map():
    mapping = page_before_map([(1, 4), (3, 5), (3, 4)])
    assert mapping[1] == {4}
    assert mapping[3] == {4, 5}


def test_part1_sums_middles_of_ordered_lists():
    assert part1(SAMPLE) == 5


def test_part2_sums_middles_of_fixed_lists():
    assert part2(SAMPLE) == 2


def test_part2_is_zero_when_all_ordered():
    assert part2("1|2\n\n1,2,3") == 0