"""A robot pushing boxes around a warehouse, in narrow and wide layouts."""

from __future__ import annotations

import re
from enum import Enum

Coordinate = tuple[int, int]

_MAP_ROWS = r"[#O.@]+(?:\n[#O.@]+)*"
_MOVES = r"(?:\n?[<>^v])+"
_MAP_PATTERN = re.compile(_MAP_ROWS)
_MOVES_PATTERN = re.compile(_MOVES)
_INPUT_PATTERN = re.compile(rf"(?P<map>{_MAP_ROWS})\n(?P<moves>{_MOVES})")


class Node(Enum):
    WALL = "#"
    BOX = "O"
    BOX_LEFT = "["
    BOX_RIGHT = "]"
    FLOOR = "."
    ROBOT = "@"


class Direction(Enum):
    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    @property
    def vector(self) -> Coordinate:
        """The (row delta, column delta) of one step."""
        return _VECTORS[self]


_VECTORS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_WIDENED = {
    Node.WALL: (Node.WALL, Node.WALL),
    Node.BOX: (Node.BOX_LEFT, Node.BOX_RIGHT),
    Node.FLOOR: (Node.FLOOR, Node.FLOOR),
}


class EndOfInstructions(Exception):
    """Raised when the robot has no moves left."""


class Warehouse:
    """The warehouse floor, the robot's position and its remaining moves."""

    def __init__(self, nodes: list[list[Node]], instructions: list[Direction]) -> None:
        robot = next(
            (
                (y, x)
                for y, row in enumerate(nodes)
                for x, node in enumerate(row)
                if node is Node.ROBOT
            ),
            None,
        )
        if robot is None:
            raise ValueError("No robot found in map")
        self.nodes = [[Node.FLOOR if n is Node.ROBOT else n for n in row] for row in nodes]
        self.instructions = list(instructions)
        self.idx = 0
        self.robot: Coordinate = robot

    def __str__(self) -> str:
        lines = []
        for y, row in enumerate(self.nodes):
            cells = [
                Node.ROBOT.value if (y, x) == self.robot else node.value
                for x, node in enumerate(row)
            ]
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def _get(self, coordinate: Coordinate) -> Node | None:
        y, x = coordinate
        if 0 <= y < len(self.nodes) and 0 <= x < len(self.nodes[y]):
            return self.nodes[y][x]
        return None

    def _shift(self, source: Coordinate, target: Coordinate, node: Node) -> None:
        self.nodes[target[0]][target[1]] = node
        self.nodes[source[0]][source[1]] = Node.FLOOR

    def widen(self) -> None:
        """Double every column; boxes become two-cell wide boxes."""
        widened = []
        for row in self.nodes:
            new_row: list[Node] = []
            for node in row:
                if node not in _WIDENED:
                    raise ValueError(f"Cannot widen node {node}")
                new_row.extend(_WIDENED[node])
            widened.append(new_row)
        self.nodes = widened
        self.robot = (self.robot[0], self.robot[1] * 2)

    def tick(self) -> None:
        """Carry out the next move, raising EndOfInstructions when none are left."""
        if self.idx >= len(self.instructions):
            raise EndOfInstructions("End of instructions")
        dy, dx = self.instructions[self.idx].vector
        if self.move_node(self.robot, (dy, dx), True):
            self.robot = (self.robot[0] + dy, self.robot[1] + dx)
        self.idx += 1

    def move_node(self, coordinate: Coordinate, vector: Coordinate, apply_move: bool) -> bool:
        """Whether the node at coordinate can move by vector; moves it if apply_move."""
        current = self._get(coordinate)
        if current is None:
            raise IndexError("Out of bounds")
        dy, dx = vector
        next_pos = (coordinate[0] + dy, coordinate[1] + dx)
        target = self._get(next_pos)

        if target is None:
            raise IndexError("Out of bounds")
        if target is Node.WALL:
            return False
        if target is Node.FLOOR:
            if apply_move:
                self._shift(coordinate, next_pos, current)
            return True

        wide = target in (Node.BOX_LEFT, Node.BOX_RIGHT)
        if target is Node.BOX or (wide and dy == 0):
            if not self.move_node(next_pos, vector, apply_move):
                return False
            if apply_move:
                self._shift(coordinate, next_pos, current)
            return True

        if wide and dx == 0:
            offset = 1 if target is Node.BOX_LEFT else -1
            other_half = (next_pos[0], next_pos[1] + offset)
            if not (
                self.move_node(next_pos, vector, False)
                and self.move_node(other_half, vector, False)
            ):
                return False
            if apply_move:
                self.move_node(next_pos, vector, True)
                self.move_node(other_half, vector, True)
                self._shift(coordinate, next_pos, current)
            return True

        raise ValueError(f"Cannot move into {target}")

    def run(self) -> None:
        """Carry out every remaining move."""
        try:
            while True:
                self.tick()
        except EndOfInstructions:
            pass

    def gps_sum(self, kind: Node) -> int:
        """Sum of 100 * row + column over every node of the given kind."""
        return sum(
            100 * y + x
            for y, row in enumerate(self.nodes)
            for x, node in enumerate(row)
            if node is kind
        )


def parse_map(text: str) -> list[list[Node]]:
    """Parse the leading block of map rows."""
    match = _MAP_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected a warehouse map")
    return [[Node(c) for c in line] for line in match.group().split("\n")]


def parse_instructions(text: str) -> list[Direction]:
    """Parse moves, which may be broken over several lines."""
    match = _MOVES_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected moves")
    return [Direction(c) for c in match.group() if c != "\n"]


def parse_input(text: str) -> Warehouse:
    """Parse a map and its moves, separated by a blank line."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected a map followed by moves")
    return Warehouse(parse_map(match["map"]), parse_instructions(match["moves"]))


def part1(text: str) -> int:
    """GPS sum of the boxes after all moves."""
    warehouse = parse_input(text)
    warehouse.run()
    return warehouse.gps_sum(Node.BOX)


def part2(text: str) -> int:
    """GPS sum of the wide boxes after all moves in the widened warehouse."""
    warehouse = parse_input(text)
    warehouse.widen()
    warehouse.run()
    return warehouse.gps_sum(Node.BOX_LEFT)