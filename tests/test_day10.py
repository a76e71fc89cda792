import pytest

from advent2024.day10 import get_path_score, get_path_trailheads, parse_input, part1, part2

EXAMPLE = "\n".join(
    [
        "89010123",
        "78121874",
        "87430965",
        "96549874",
        "45678903",
        "32019012",
        "01329801",
        "10456732",
    ]
) + "\n"


def test_part1():
    assert part1(EXAMPLE) == 36


def test_part2():
    assert part2(EXAMPLE) == 81


def test_parse_input():
    assert parse_input("0123\n5123") == ["0123", "5123"]


def test_parse_input_rejects_letters():
    with pytest.raises(ValueError):
        parse_input("abc")


def test_get_path_trailheads_straight_line():
    assert get_path_trailheads(["0123456789"], (0, 0)) == [(0, 9)]


def test_get_path_score_counts_paths_or_summits():
    grid = ["0123", "1234", "2345", "3456", "4567", "5678", "6789", "7898"]
    distinct = get_path_score(grid, (0, 0), False)
    paths = get_path_score(grid, (0, 0), True)
    assert paths >= distinct
    assert distinct == len(set(get_path_trailheads(grid, (0, 0))))


def test_get_path_score_not_a_trailhead():
    assert get_path_score(["0123456789"], (0, 1), False) == 0