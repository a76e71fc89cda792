"""Guard gallivant: tracing a patrol route and finding obstacles that cause loops."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

Coordinate = tuple[int, int]

_GRID_PATTERN = re.compile(r"[.#^]+(?:\n[.#^]+)*")


class Node(Enum):
    OPEN = "."
    OBSTACLE = "#"
    GUARD = "^"


class Direction(Enum):
    """The four walking directions, valued as (row delta, column delta)."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)


_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


def rotate(direction: Direction) -> Direction:
    """The direction after a right turn."""
    return _CLOCKWISE[direction]


def apply_movement(position: Coordinate, direction: Direction) -> Coordinate:
    """The position one step away in the given direction."""
    dy, dx = direction.value
    return position[0] + dy, position[1] + dx


@dataclass
class Grid:
    """The lab floor with the guard's position and heading."""

    nodes: list[list[Node]]
    width: int
    height: int
    guard: Coordinate
    guard_direction: Direction = Direction.UP

    def contains(self, position: Coordinate) -> bool:
        """Whether position lies on the grid."""
        return 0 <= position[0] < self.height and 0 <= position[1] < self.width

    def node_at(self, position: Coordinate) -> Node:
        """The node at a position on the grid."""
        return self.nodes[position[0]][position[1]]

    def walk_step(self) -> bool:
        """Turn or step once; False when the next step leaves the grid."""
        new_pos = apply_movement(self.guard, self.guard_direction)
        if not self.contains(new_pos):
            return False
        if self.node_at(new_pos) is Node.OBSTACLE:
            self.guard_direction = rotate(self.guard_direction)
        else:
            self.guard = new_pos
        return True


def parse_grid(text: str) -> list[list[Node]]:
    """Parse the leading block of grid rows."""
    match = _GRID_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected a grid")
    return [[Node(c) for c in line] for line in match.group().split("\n")]


def parse_input(text: str) -> Grid:
    """Parse the grid and locate the guard, who starts facing up."""
    nodes = parse_grid(text)
    guard = next(
        (
            (y, x)
            for y, row in enumerate(nodes)
            for x, node in enumerate(row)
            if node is Node.GUARD
        ),
        None,
    )
    if guard is None:
        raise ValueError("No guard found in input")
    return Grid(nodes=nodes, width=len(nodes[0]), height=len(nodes), guard=guard)


def part1(text: str) -> int:
    """Number of distinct positions the guard visits before leaving."""
    grid = parse_input(text)
    visited = {grid.guard}
    while grid.walk_step():
        visited.add(grid.guard)
    return len(visited)


def _loops(grid: Grid) -> bool:
    states = {(grid.guard, grid.guard_direction)}
    while grid.walk_step():
        state = (grid.guard, grid.guard_direction)
        if state in states:
            return True
        states.add(state)
    return False


def part2(text: str) -> int:
    """Number of positions where a new obstacle traps the guard in a loop."""
    grid = parse_input(text)
    visited: set[Coordinate] = set()
    count = 0

    while grid.walk_step():
        visited.add(grid.guard)
        forward = apply_movement(grid.guard, grid.guard_direction)
        if (
            forward not in visited
            and grid.contains(forward)
            and grid.node_at(forward) is Node.OPEN
        ):
            grid.nodes[forward[0]][forward[1]] = Node.OBSTACLE
            position, direction = grid.guard, grid.guard_direction
            if _loops(grid):
                count += 1
            grid.guard, grid.guard_direction = position, direction
            grid.nodes[forward[0]][forward[1]] = Node.OPEN

    return count