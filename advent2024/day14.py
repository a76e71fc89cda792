"""Restroom redoubt: robots wrapping around a grid."""

from __future__ import annotations

import re
from collections.abc import Sequence

Coordinate = tuple[int, int]
State = tuple[Coordinate, Coordinate]

WIDTH = 101
HEIGHT = 103
ITERATIONS = 100

_STATE = r"p=-?\d+,-?\d+ v=-?\d+,-?\d+"
_STATE_PATTERN = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")
_INPUT_PATTERN = re.compile(rf"{_STATE}(?:\n{_STATE})*")


def parse_state(text: str) -> State:
    """Parse 'p=a,b v=c,d' into ((a, b), (c, d))."""
    match = _STATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a robot at {text[:20]!r}")
    a, b, c, d = (int(n) for n in match.groups())
    return (a, b), (c, d)


def parse_input(text: str) -> list[State]:
    """Parse the leading block of robots, one per line."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected robots")
    return [parse_state(line) for line in match.group().split("\n")]


def position_after(
    width: int, height: int, iterations: int, pos: Coordinate, vector: Coordinate
) -> Coordinate:
    """Where a robot is after the given iterations, wrapping at the grid edges."""
    return (
        (pos[0] + vector[0] * iterations) % width,
        (pos[1] + vector[1] * iterations) % height,
    )


def safety_rating(width: int, height: int, iterations: int, states: Sequence[State]) -> int:
    """Product of the robot counts in the four quadrants after the iterations."""
    positions = [
        position_after(width, height, iterations, pos, vector) for pos, vector in states
    ]
    width_mid = width // 2
    height_mid = height // 2
    quadrants = [0, 0, 0, 0]
    for row, column in positions:
        if column == width_mid or row == height_mid:
            continue
        quadrants[2 * (row > height_mid) + (column > width_mid)] += 1
    upper_left, upper_right, lower_left, lower_right = quadrants
    return upper_left * upper_right * lower_left * lower_right


def iterations_for_unique_positions(width: int, height: int, states: Sequence[State]) -> int:
    """The first iteration, from 1, at which no two robots share a position."""
    current = list(states)
    iterations = 0
    while True:
        iterations += 1
        current = [
            (position_after(width, height, 1, pos, vector), vector) for pos, vector in current
        ]
        if len({pos for pos, _ in current}) == len(current):
            return iterations


def part1(text: str) -> int:
    """Safety rating after 100 seconds on the full-size grid."""
    return safety_rating(WIDTH, HEIGHT, ITERATIONS, parse_input(text))


def part2(text: str) -> int:
    """Seconds until every robot stands on its own tile."""
    return iterations_for_unique_positions(WIDTH, HEIGHT, parse_input(text))