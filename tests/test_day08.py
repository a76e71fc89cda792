import pytest

from advent2024.day08 import (
    get_antenna_coordinates,
    get_antinodes,
    parse_input,
    part1,
    part2,
)

EXAMPLE = "\n".join(
    [
        "............",
        "........0...",
        ".....0......",
        ".......0....",
        "....0.......",
        "......A.....",
        "............",
        "............",
        "........A...",
        ".........A..",
        "............",
        "............",
    ]
)


def test_part1():
    assert part1(EXAMPLE) == 14


def test_part2():
    assert part2(EXAMPLE) == 34


def test_parse_input():
    assert parse_input(".x\ny.") == [".x", "y."]


def test_parse_input_rejects_newline_start():
    with pytest.raises(ValueError):
        parse_input("\n.x")


def test_parse_input_stops_at_invalid_character():
    assert parse_input(".x\ny.\n#") == [".x", "y."]


def test_get_antenna_coordinates():
    coordinates = get_antenna_coordinates([".x", "y.", "x."])
    assert coordinates == {"x": [(0, 1), (2, 0)], "y": [(1, 0)]}


def test_get_antinodes_without_harmonics():
    antinodes = get_antinodes(3, 3, {"a": [(0, 0), (1, 1)]}, False)
    assert antinodes == {(2, 2)}


def test_get_antinodes_with_harmonics():
    antinodes = get_antinodes(3, 3, {"a": [(0, 0), (1, 1)]}, True)
    assert antinodes == {(0, 0), (1, 1), (2, 2)}