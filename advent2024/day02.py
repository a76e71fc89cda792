"""Red-nosed reports: checking level sequences for safety."""

from __future__ import annotations

import re
from collections.abc import Sequence

MAX_LEVEL = 3

_LINE = r"-?\d+(?:[ \t]+-?\d+)*"
_LINE_PATTERN = re.compile(_LINE)
_INPUT_PATTERN = re.compile(rf"{_LINE}(?:\n{_LINE})*")


def parse_line(line: str) -> list[int]:
    """Parse a report of space separated integers at the start of line."""
    match = _LINE_PATTERN.match(line)
    if match is None:
        raise ValueError(f"Expected a report at {line[:20]!r}")
    return [int(n) for n in match.group().split()]


def parse_input(text: str) -> list[list[int]]:
    """Parse the leading block of reports, one per line."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected reports")
    return [parse_line(line) for line in match.group().split("\n")]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_safe(report: Sequence[int]) -> bool:
    """Whether levels strictly rise or fall by at most MAX_LEVEL each step."""
    if len(report) < 2:
        return True
    prev_diff = report[1] - report[0]
    if prev_diff == 0:
        return False
    for a, b in zip(report, report[1:]):
        diff = b - a
        if diff == 0 or _sign(diff) != _sign(prev_diff) or abs(diff) > MAX_LEVEL:
            return False
        prev_diff = diff
    return True


def _safe_with_dampener(report: Sequence[int]) -> bool:
    return is_safe(report) or any(
        is_safe([*report[:i], *report[i + 1:]]) for i in range(len(report))
    )


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in parse_input(text) if is_safe(report))


def part2(text: str) -> int:
    """Number of reports that are safe after removing at most one level."""
    return sum(1 for report in parse_input(text) if _safe_with_dampener(report))