"""Hiking trails on a topographic map: trailhead scores and ratings."""

from __future__ import annotations

import re
from collections.abc import Sequence

_MAP_PATTERN = re.compile(r"[0-9]+(?:\n[0-9]+)*")

Coordinate = tuple[int, int]


def parse_input(text: str) -> list[str]:
    """Parse the leading block of digit rows."""
    match = _MAP_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected rows of digits")
    return match.group().split("\n")


def _climbs(first: str, second: str) -> bool:
    return ord(second) - ord(first) == 1


def get_path_trailheads(grid: Sequence[Sequence[str]], pos: Coordinate) -> list[Coordinate]:
    """Every summit reached from pos by one-step climbs, one entry per path."""
    y, x = pos
    node = grid[y][x]
    if node == "9":
        return [pos]

    height, width = len(grid), len(grid[0])
    neighbours = [
        (y - 1, x) if y > 0 else None,
        (y + 1, x) if y < height - 1 else None,
        (y, x - 1) if x > 0 else None,
        (y, x + 1) if x < width - 1 else None,
    ]
    summits: list[Coordinate] = []
    for neighbour in neighbours:
        if neighbour is not None and _climbs(node, grid[neighbour[0]][neighbour[1]]):
            summits.extend(get_path_trailheads(grid, neighbour))
    return summits


def get_path_score(grid: Sequence[Sequence[str]], pos: Coordinate, unique_paths: bool) -> int:
    """Score of a trailhead: distinct summits, or every path when unique_paths is set."""
    y, x = pos
    if grid[y][x] != "0":
        return 0
    summits = get_path_trailheads(grid, pos)
    return len(summits) if unique_paths else len(set(summits))


def _total(text: str, unique_paths: bool) -> int:
    grid = parse_input(text)
    return sum(
        get_path_score(grid, (y, x), unique_paths)
        for y, row in enumerate(grid)
        for x in range(len(row))
    )


def part1(text: str) -> int:
    """Sum of the trailhead scores."""
    return _total(text, False)


def part2(text: str) -> int:
    """Sum of the trailhead ratings."""
    return _total(text, True)