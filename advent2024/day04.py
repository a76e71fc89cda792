"""Word search for XMAS: straight words and crossed MAS shapes."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

_GRID_PATTERN = re.compile(r"[XMAS]+(?:\n[XMAS]+)*")
_WORD = "XMAS"


class Direction(Enum):
    """The eight grid directions, valued as (row delta, column delta)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)


def parse_input(text: str) -> list[str]:
    """Parse the leading block of rows made only of the letters X, M, A and S."""
    match = _GRID_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected rows of X, M, A and S")
    return match.group().split("\n")


def search_xmas(grid: Sequence[Sequence[str]], y: int, x: int, direction: Direction) -> bool:
    """Whether XMAS is spelled from (y, x) going in the given direction."""
    dy, dx = direction.value
    end_y = y + (len(_WORD) - 1) * dy
    end_x = x + (len(_WORD) - 1) * dx
    if not (0 <= end_y < len(grid) and 0 <= end_x < len(grid[0])):
        return False
    return all(grid[y + i * dy][x + i * dx] == letter for i, letter in enumerate(_WORD))


def search_x_mas(grid: Sequence[Sequence[str]], y: int, x: int) -> bool:
    """Whether two diagonal MAS words cross at an A on (y, x)."""
    if y == 0 or x == 0 or y + 1 == len(grid) or x + 1 == len(grid[0]):
        return False
    if grid[y][x] != "A":
        return False
    ends = {"M", "S"}
    falling = {grid[y - 1][x - 1], grid[y + 1][x + 1]}
    rising = {grid[y - 1][x + 1], grid[y + 1][x - 1]}
    return falling == ends and rising == ends


def part1(text: str) -> int:
    """Count every XMAS in the grid, in any of the eight directions."""
    grid = parse_input(text)
    return sum(
        search_xmas(grid, y, x, direction)
        for y, row in enumerate(grid)
        for x in range(len(row))
        for direction in Direction
    )


def part2(text: str) -> int:
    """Count the crossed MAS shapes in the grid."""
    grid = parse_input(text)
    return sum(
        search_x_mas(grid, y, x) for y, row in enumerate(grid) for x in range(len(row))
    )