"""Race condition: finding cheats through walls that shorten a race track."""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import Enum

Coordinate = tuple[int, int]

_MAP_PATTERN = re.compile(r"[#.SE]+(?:\n[#.SE]+)*")
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Node(Enum):
    WALL = "#"
    FLOOR = "."
    START = "S"
    END = "E"


# A cell is a Node, or an int once it is on the solved path (its path distance).
Cell = Node | int


def _neighbours(coordinate: Coordinate) -> Iterator[Coordinate]:
    y, x = coordinate
    for dy, dx in _NEIGHBOURS:
        yield y + dy, x + dx


def _within(coordinate: Coordinate, distance: int) -> Iterator[Coordinate]:
    y, x = coordinate
    for dy in range(-distance, distance + 1):
        remaining = distance - abs(dy)
        for dx in range(-remaining, remaining + 1):
            if dy or dx:
                yield y + dy, x + dx


class RaceTrack:
    """The track grid, with start and end cells replaced by floor."""

    def __init__(self, nodes: list[list[Node]]) -> None:
        start: Coordinate = (0, 0)
        end: Coordinate = (0, 0)
        for y, row in enumerate(nodes):
            for x, node in enumerate(row):
                if node is Node.START:
                    start = (y, x)
                elif node is Node.END:
                    end = (y, x)
        self.nodes: list[list[Cell]] = [list(row) for row in nodes]
        self.nodes[start[0]][start[1]] = Node.FLOOR
        self.nodes[end[0]][end[1]] = Node.FLOOR
        self.start = start
        self.end = end

    def __str__(self) -> str:
        return "".join(
            "".join(" " if isinstance(cell, int) else cell.value for cell in row) + "\n"
            for row in self.nodes
        )

    def get_node(self, coordinate: Coordinate) -> Cell | None:
        """The cell at coordinate, or None outside the grid."""
        y, x = coordinate
        if 0 <= y < len(self.nodes) and 0 <= x < len(self.nodes[0]):
            return self.nodes[y][x]
        return None

    def solve(self) -> None:
        """Walk the track depth first from the start, labelling floor cells with their distance."""
        stack = [(self.start, 0, _neighbours(self.start))]
        while stack:
            _, dist, candidates = stack[-1]
            for candidate in candidates:
                if self.get_node(candidate) is Node.FLOOR:
                    self.nodes[candidate[0]][candidate[1]] = dist + 1
                    stack.append((candidate, dist + 1, _neighbours(candidate)))
                    break
            else:
                stack.pop()

    def find_cheats(self, dist: int) -> list[int]:
        """Time saved by every cheat of at most dist steps that saves more than 1."""
        cheats: list[int] = []
        for y, row in enumerate(self.nodes):
            for x, current_dist in enumerate(row):
                if not isinstance(current_dist, int):
                    continue
                for option in _within((y, x), dist):
                    cheat_dist = self.get_node(option)
                    if not isinstance(cheat_dist, int):
                        continue
                    steps = abs(option[0] - y) + abs(option[1] - x)
                    saved = cheat_dist - current_dist - steps
                    if saved > 1:
                        cheats.append(saved)
        return cheats


def parse_input(text: str) -> RaceTrack:
    """Parse the leading block of track rows."""
    match = _MAP_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected a race track")
    return RaceTrack([[Node(c) for c in line] for line in match.group().split("\n")])


def _count_cheats(text: str, dist: int) -> int:
    track = parse_input(text)
    track.solve()
    return sum(1 for saved in track.find_cheats(dist) if saved >= 100)


def part1(text: str) -> int:
    """Cheats of up to 2 steps that save at least 100 picoseconds."""
    return _count_cheats(text, 2)


def part2(text: str) -> int:
    """Cheats of up to 20 steps that save at least 100 picoseconds."""
    return _count_cheats(text, 20)