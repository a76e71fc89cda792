"""Claw contraption: the cheapest button presses that reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass

PART2_OFFSET = 10_000_000_000_000

_BUTTON = r"Button [AB]: X\+\d+, Y\+\d+"
_PRIZE = r"Prize: X=\d+, Y=\d+"
_PROBLEM = rf"{_BUTTON}\n{_BUTTON}\n{_PRIZE}"
_BUTTON_PATTERN = re.compile(r"Button [AB]: X\+(\d+), Y\+(\d+)")
_PRIZE_PATTERN = re.compile(r"Prize: X=(\d+), Y=(\d+)")
_PROBLEM_PATTERN = re.compile(_PROBLEM)
_INPUT_PATTERN = re.compile(rf"{_PROBLEM}(?:\n+{_PROBLEM})*")


@dataclass(frozen=True)
class Button:
    """How far one press moves the claw."""

    x: int
    y: int


@dataclass(frozen=True)
class Problem:
    """A claw machine: its two buttons and the prize position."""

    a: Button
    b: Button
    prize: tuple[int, int]


def parse_button(text: str) -> Button:
    """Parse 'Button A: X+n, Y+m'."""
    match = _BUTTON_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a button at {text[:20]!r}")
    return Button(int(match[1]), int(match[2]))


def parse_prize(text: str) -> tuple[int, int]:
    """Parse 'Prize: X=n, Y=m'."""
    match = _PRIZE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a prize at {text[:20]!r}")
    return int(match[1]), int(match[2])


def parse_problem(text: str) -> Problem:
    """Parse two button lines followed by a prize line."""
    match = _PROBLEM_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a claw machine at {text[:20]!r}")
    a_line, b_line, prize_line = match.group().split("\n")
    return Problem(parse_button(a_line), parse_button(b_line), parse_prize(prize_line))


def parse_input(text: str) -> list[Problem]:
    """Parse claw machines separated by blank lines."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected claw machines")
    return [parse_problem(m.group()) for m in _PROBLEM_PATTERN.finditer(match.group())]


def solve_problem(problem: Problem) -> tuple[int, int] | None:
    """Presses of A and B that reach the prize exactly, or None if there are none."""
    ax, bx, px = problem.a.x, problem.b.x, problem.prize[0]
    ay, by, py = problem.a.y, problem.b.y, problem.prize[1]

    # Scale both equations so the A terms match, then eliminate A.
    b1, p1 = bx * ay, px * ay
    b2, p2 = by * ax, py * ax
    if b1 > b2:
        b_coef, rhs = b1 - b2, p1 - p2
    else:
        b_coef, rhs = b2 - b1, p2 - p1

    if rhs % b_coef != 0:
        return None
    b = rhs // b_coef

    remaining = px - bx * b
    if remaining % ax != 0:
        return None
    a = remaining // ax

    if a < 0 or b < 0:
        raise ValueError("Equations are not compatible")
    return a, b


def _tokens(problems: list[Problem]) -> int:
    total = 0
    for problem in problems:
        solution = solve_problem(problem)
        if solution is not None:
            a, b = solution
            total += 3 * a + b
    return total


def part1(text: str) -> int:
    """Fewest tokens to win every winnable prize."""
    return _tokens(parse_input(text))


def part2(text: str) -> int:
    """Fewest tokens once every prize is moved far away."""
    return _tokens(
        [
            Problem(p.a, p.b, (p.prize[0] + PART2_OFFSET, p.prize[1] + PART2_OFFSET))
            for p in parse_input(text)
        ]
    )