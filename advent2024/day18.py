"""RAM run: shortest path through a grid as corrupted bytes fall into it."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Sequence

Coordinate = tuple[int, int]

_COORDINATE = r"-?\d+,-?\d+"
_COORDINATE_PATTERN = re.compile(r"(-?\d+),(-?\d+)")
_INPUT_PATTERN = re.compile(rf"{_COORDINATE}(?:\n{_COORDINATE})*")
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))

SIZE = 71
FALLEN = 1024


class Grid:
    """Memory space counting how many bytes fell on each cell."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.nodes = [[0] * width for _ in range(height)]

    def __str__(self) -> str:
        def cell(value: int) -> str:
            if value == 0:
                return "."
            if value == 1:
                return "#"
            return str(abs(value) % 10)

        return "".join("".join(cell(v) for v in row) + "\n" for row in self.nodes)

    def _contains(self, coordinate: Coordinate) -> bool:
        row, column = coordinate
        return 0 <= row < self.height and 0 <= column < self.width

    def drop_byte(self, coordinate: Coordinate) -> None:
        """Record a byte falling on (row, column)."""
        if not self._contains(coordinate):
            raise IndexError("Coordinate out of bounds")
        self.nodes[coordinate[0]][coordinate[1]] += 1

    def get_node(self, coordinate: Coordinate) -> int | None:
        """Bytes fallen on (row, column), or None outside the grid."""
        if not self._contains(coordinate):
            return None
        return self.nodes[coordinate[0]][coordinate[1]]

    def shortest_distance(self, start: Coordinate, end: Coordinate) -> int:
        """Fewest steps from start to end over clear cells; ValueError if unreachable."""
        queue = deque([(0, start)])
        seen = {start}
        while queue:
            dist, coord = queue.popleft()
            if coord == end:
                return dist
            for dy, dx in _NEIGHBOURS:
                neighbour = (coord[0] + dy, coord[1] + dx)
                if neighbour not in seen and self.get_node(neighbour) == 0:
                    seen.add(neighbour)
                    queue.append((dist + 1, neighbour))
        raise ValueError("No path found")


def parse_coordinate(text: str) -> Coordinate:
    """Parse 'X,Y' (column from the left, row from the top) into (row, column)."""
    match = _COORDINATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a coordinate at {text[:20]!r}")
    return int(match[2]), int(match[1])


def parse_input(text: str) -> list[Coordinate]:
    """Parse the leading block of coordinate lines."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected coordinates")
    return [parse_coordinate(line) for line in match.group().split("\n")]


def _grid_with(coordinates: Sequence[Coordinate], size: int, fallen: int) -> Grid:
    if len(coordinates) < fallen:
        raise ValueError(f"Expected at least {fallen} bytes, got {len(coordinates)}")
    grid = Grid(size, size)
    for coordinate in coordinates[:fallen]:
        grid.drop_byte(coordinate)
    return grid


def first_blocking_byte(
    coordinates: Sequence[Coordinate], size: int, fallen: int
) -> Coordinate:
    """The first byte after the first fallen ones that cuts the corner-to-corner path."""
    grid = _grid_with(coordinates, size, fallen)
    goal = (size - 1, size - 1)
    for coordinate in coordinates[fallen:]:
        grid.drop_byte(coordinate)
        try:
            grid.shortest_distance((0, 0), goal)
        except ValueError:
            return coordinate
    raise ValueError("No blocking byte found")


def part1(text: str) -> int:
    """Fewest steps to the exit after the first 1024 bytes have fallen."""
    grid = _grid_with(parse_input(text), SIZE, FALLEN)
    return grid.shortest_distance((0, 0), (SIZE - 1, SIZE - 1))


def part2(text: str) -> str:
    """The 'X,Y' of the first byte that cuts off the exit."""
    row, column = first_blocking_byte(parse_input(text), SIZE, FALLEN)
    return f"{column},{row}"