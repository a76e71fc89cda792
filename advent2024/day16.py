"""Reindeer maze: cheapest route with turn costs and tiles on best routes."""

from __future__ import annotations

import heapq
import re
from dataclasses import dataclass, field
from enum import Enum

Coordinate = tuple[int, int]

MOVE_COST = 1
TURN_COST = 1000

_MAP_PATTERN = re.compile(r"[#.SE]+(?:\n[#.SE]+)*")

_NORTH = (-1, 0)
_EAST = (0, 1)
_SOUTH = (1, 0)
_WEST = (0, -1)
_RANK = {_NORTH: 0, _EAST: 1, _SOUTH: 2, _WEST: 3}


class Node(Enum):
    WALL = "#"
    FLOOR = "."
    START = "S"
    END = "E"


@dataclass
class Maze:
    """The maze grid with its start, end and the starting direction (facing east)."""

    nodes: list[list[Node]]
    start: Coordinate = field(init=False)
    end: Coordinate = field(init=False)
    direction: Coordinate = field(init=False, default=_EAST)

    def __post_init__(self) -> None:
        start: Coordinate = (0, 0)
        end: Coordinate = (0, 0)
        for y, row in enumerate(self.nodes):
            for x, node in enumerate(row):
                if node is Node.START:
                    start = (y, x)
                elif node is Node.END:
                    end = (y, x)
        self.start = start
        self.end = end

    def __str__(self) -> str:
        return "".join("".join(node.value for node in row) + "\n" for row in self.nodes)

    def node_at(self, coordinate: Coordinate) -> Node | None:
        """The node at coordinate, or None outside the grid."""
        y, x = coordinate
        if 0 <= y < len(self.nodes) and 0 <= x < len(self.nodes[y]):
            return self.nodes[y][x]
        return None


class _State:
    """Queue entry ordered so the highest (least negative) score pops first."""

    __slots__ = ("score", "coord", "direction", "path")

    def __init__(
        self, score: int, coord: Coordinate, direction: Coordinate, path: tuple[Coordinate, ...]
    ) -> None:
        self.score = score
        self.coord = coord
        self.direction = direction
        self.path = path

    def _key(self) -> tuple:
        return (self.score, self.coord, _RANK[self.direction], self.path)

    def __lt__(self, other: _State) -> bool:
        return self._key() > other._key()


def _add(coord: Coordinate, vector: Coordinate) -> Coordinate:
    return coord[0] + vector[0], coord[1] + vector[1]


def _left(direction: Coordinate) -> Coordinate:
    return -direction[1], direction[0]


def _right(direction: Coordinate) -> Coordinate:
    return direction[1], -direction[0]


def _open(maze: Maze, coordinate: Coordinate) -> bool:
    node = maze.node_at(coordinate)
    return node is not None and node is not Node.WALL


def solve_maze(maze: Maze, explore_duplicate_best: bool) -> tuple[int, set[Coordinate]]:
    """The lowest score to the end, and the tiles on the routes found to the end."""
    queue = [_State(0, maze.start, maze.direction, (maze.start,))]
    seen: dict[Coordinate, int] = {}
    min_score: int | None = None
    optimal_path_nodes: set[Coordinate] = set()

    while queue:
        state = heapq.heappop(queue)
        score, coord, direction, path = state.score, state.coord, state.direction, state.path

        if coord == maze.end:
            optimal_path_nodes.update(path)
            if min_score is None:
                min_score = -score
            continue

        if min_score is not None and -score > min_score:
            continue

        forward = _add(coord, direction)
        if forward not in seen or (explore_duplicate_best and seen[forward] >= score):
            seen[forward] = score
            if _open(maze, forward):
                heapq.heappush(
                    queue, _State(score - MOVE_COST, forward, direction, path + (forward,))
                )

        for turned in (_left(direction), _right(direction)):
            side = _add(coord, turned)
            if _open(maze, side) and side not in seen:
                heapq.heappush(queue, _State(score - TURN_COST, coord, turned, path))

    if min_score is None:
        raise ValueError("No path found")
    return min_score, optimal_path_nodes


def parse_input(text: str) -> Maze:
    """Parse the leading block of maze rows."""
    match = _MAP_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected a maze")
    return Maze([[Node(c) for c in line] for line in match.group().split("\n")])


def part1(text: str) -> int:
    """Lowest score a reindeer can get from start to end."""
    score, _ = solve_maze(parse_input(text), False)
    return score


def part2(text: str) -> int:
    """Number of tiles on at least one best route."""
    _, tiles = solve_maze(parse_input(text), True)
    return len(tiles)