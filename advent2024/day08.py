"""Resonant collinearity: antinodes created by pairs of matching antennas."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

Coordinate = tuple[int, int]

_CELL = r"(?:\.|[^\W_])"
_MAP_PATTERN = re.compile(rf"{_CELL}+(?:\n{_CELL}+)*")


def parse_input(text: str) -> list[str]:
    """Parse the leading block of rows of '.' and alphanumeric antenna ids."""
    match = _MAP_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected an antenna map")
    return match.group().split("\n")


def get_antenna_coordinates(antenna_map: Sequence[Sequence[str]]) -> dict[str, list[Coordinate]]:
    """Coordinates of every antenna, grouped by antenna id in reading order."""
    coordinates: dict[str, list[Coordinate]] = {}
    for y, row in enumerate(antenna_map):
        for x, cell in enumerate(row):
            if cell != ".":
                coordinates.setdefault(cell, []).append((y, x))
    return coordinates


def get_antinodes(
    height: int,
    width: int,
    antenna_coordinates: Mapping[str, Sequence[Coordinate]],
    with_harmonics: bool,
) -> set[Coordinate]:
    """Every antinode within the map produced by pairs of same-id antennas."""
    antinodes: set[Coordinate] = set()
    for coordinates in antenna_coordinates.values():
        for y1, x1 in coordinates:
            for y2, x2 in coordinates:
                if (y1, x1) == (y2, x2):
                    continue
                dy, dx = y2 - y1, x2 - x1
                y, x = (y1, x1) if with_harmonics else (y2, x2)
                while True:
                    y, x = y + dy, x + dx
                    if not (0 <= y < height and 0 <= x < width):
                        break
                    antinodes.add((y, x))
                    if not with_harmonics:
                        break
    return antinodes


def _count(text: str, with_harmonics: bool) -> int:
    antenna_map = parse_input(text)
    coordinates = get_antenna_coordinates(antenna_map)
    return len(get_antinodes(len(antenna_map), len(antenna_map[0]), coordinates, with_harmonics))


def part1(text: str) -> int:
    """Number of unique antinode locations."""
    return _count(text, False)


def part2(text: str) -> int:
    """Number of unique antinode locations, counting resonant harmonics."""
    return _count(text, True)