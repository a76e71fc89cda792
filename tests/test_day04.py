import pytest

from advent2024.day04 import Direction, parse_input, part1, part2, search_x_mas, search_xmas

EXAMPLE = "\n".join(
    [
        "MMMSXXMASM",
        "MSAMXMSMSA",
        "AMXSXMAAMM",
        "MSAMASMSMX",
        "XMASAMXAMM",
        "XXAMMXXAMA",
        "SMSMSASXSS",
        "SAXAMASAAA",
        "MAMMMXMMMM",
        "MXMXAXMASX",
    ]
) + "\n"


def test_part1():
    assert part1(EXAMPLE) == 18


def test_part2():
    assert part2(EXAMPLE) == 9


def test_search_xmas():
    grid = ["XMAS", "SAMX"]
    assert search_xmas(grid, 0, 0, Direction.RIGHT)
    assert search_xmas(grid, 1, 3, Direction.LEFT)
    assert not search_xmas(grid, 1, 0, Direction.LEFT)
    assert not search_xmas(grid, 0, 3, Direction.RIGHT)


def test_search_xmas_vertical_and_diagonal():
    grid = ["XXXX", "MMMM", "AAAA", "SSSS"]
    assert search_xmas(grid, 0, 0, Direction.DOWN)
    assert search_xmas(grid, 0, 0, Direction.DOWN_RIGHT)
    assert search_xmas(grid, 0, 3, Direction.DOWN_LEFT)
    assert not search_xmas(grid, 3, 0, Direction.UP)


def test_search_x_mas():
    grid = ["M.S", ".A.", "M.S"]
    assert search_x_mas(grid, 1, 1)
    assert not search_x_mas(grid, 0, 0)
    assert not search_x_mas(["M.M", ".A.", "M.S"], 1, 1)


@pytest.mark.parametrize("letter", ["X", "M", "A", "S"])
def test_parse_single_letter(letter):
    assert parse_input(letter) == [letter]


def test_parse_input():
    assert parse_input("XMAS\nSMAX") == ["XMAS", "SMAX"]


def test_parse_input_rejects_other_letters():
    with pytest.raises(ValueError):
        parse_input("abc")