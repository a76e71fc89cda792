"""Bridge repair: finding operators that make calibration equations true."""

from __future__ import annotations

import re
from collections.abc import Sequence

_LINE = r"\d+: \d+(?:[ \t]+\d+)*"
_LINE_PATTERN = re.compile(r"(\d+): (\d+(?:[ \t]+\d+)*)")
_INPUT_PATTERN = re.compile(rf"{_LINE}(?:\n{_LINE})*")


def parse_line(line: str) -> tuple[int, list[int]]:
    """Parse 'total: n1 n2 ...' at the start of line."""
    match = _LINE_PATTERN.match(line)
    if match is None:
        raise ValueError(f"Expected an equation at {line[:20]!r}")
    return int(match[1]), [int(n) for n in match[2].split()]


def parse_input(text: str) -> list[tuple[int, list[int]]]:
    """Parse the leading block of equations, one per line."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected equations")
    return [parse_line(line) for line in match.group().split("\n")]


def search_for_sum(total: int, numbers: Sequence[int], with_concat: bool) -> bool:
    """Whether +, * (and concatenation if with_concat), left to right, reach total."""
    if len(numbers) == 1:
        return total == numbers[0]

    last = numbers[-1]
    rest = numbers[:-1]

    if total % last == 0 and search_for_sum(total // last, rest, with_concat):
        return True

    if total >= last:
        remainder = total - last
        if search_for_sum(remainder, rest, with_concat):
            return True
        if with_concat:
            size = 10 ** len(str(last))
            if remainder % size == 0 and search_for_sum(remainder // size, rest, with_concat):
                return True

    return False


def _calibration(text: str, with_concat: bool) -> int:
    return sum(
        total
        for total, numbers in parse_input(text)
        if search_for_sum(total, numbers, with_concat)
    )


def part1(text: str) -> int:
    """Sum of totals reachable with + and *."""
    return _calibration(text, False)


def part2(text: str) -> int:
    """Sum of totals reachable with +, * and concatenation."""
    return _calibration(text, True)