"""Historian hysteria: comparing two lists of location ids."""

from __future__ import annotations

import re
from collections import Counter

_NUMBER = r"-?\d+"
_LINE = rf"{_NUMBER}[ \t\r\n]+{_NUMBER}"
_LINE_PATTERN = re.compile(rf"({_NUMBER})[ \t\r\n]+({_NUMBER})")
_INPUT_PATTERN = re.compile(rf"{_LINE}(?:\n{_LINE})*")


def parse_line(line: str) -> tuple[int, int]:
    """Parse two whitespace separated integers at the start of line."""
    match = _LINE_PATTERN.match(line)
    if match is None:
        raise ValueError(f"Expected two numbers at {line[:20]!r}")
    return int(match[1]), int(match[2])


def parse_input(text: str) -> list[tuple[int, int]]:
    """Parse the leading block of number pairs, one pair per line."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected pairs of numbers")
    return [
        (int(m[1]), int(m[2])) for m in _LINE_PATTERN.finditer(match.group())
    ]


def part1(text: str) -> int:
    """Total distance between the sorted left and right lists."""
    pairs = parse_input(text)
    left = sorted(a for a, _ in pairs)
    right = sorted(b for _, b in pairs)
    return sum(abs(b - a) for a, b in zip(left, right))


def part2(text: str) -> int:
    """Similarity score: each left number times its count in the right list."""
    pairs = parse_input(text)
    counts = Counter(b for _, b in pairs)
    return sum(a * counts[a] for a, _ in pairs)