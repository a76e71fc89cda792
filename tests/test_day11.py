import pytest

from advent2024.day11 import parse_input, part1, part2, stone_count_after_ticks, stone_tick

TEST_INPUT = "125 17\n"


def test_part1():
    assert part1(TEST_INPUT) == 55312


def test_part2():
    assert part2(TEST_INPUT) == 65_601_038_650_482


def test_stone_tick_rule1():
    assert stone_tick(0) == (1, None)


def test_stone_tick_rule2():
    assert stone_tick(10) == (1, 0)
    assert stone_tick(1000) == (10, 0)
    assert stone_tick(1234) == (12, 34)


def test_stone_tick_rule3():
    assert stone_tick(1) == (2024, None)


@pytest.mark.parametrize(
    ("stone", "ticks", "expected"),
    [(0, 1, 1), (1, 1, 1), (2024, 1, 2), (0, 5, 4), (0, 6, 7)],
)
def test_stone_count_after_ticks(stone, ticks, expected):
    assert stone_count_after_ticks(stone, ticks, {}) == expected


def test_stone_count_fills_cache():
    cache = {}
    stone_count_after_ticks(2024, 1, cache)
    assert cache == {(2024, 1): 2}


def test_parse_input():
    assert parse_input("1 2 415") == [1, 2, 415]


def test_parse_input_rejects_garbage():
    with pytest.raises(ValueError):
        parse_input("abc")