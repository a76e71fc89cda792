"""Plutonian pebbles: counting stones that split and change on every blink."""

from __future__ import annotations

import re

_STONES_PATTERN = re.compile(r"[0-9]+(?:[ \t]+[0-9]+)*")


def parse_input(text: str) -> list[int]:
    """Parse the leading line of stone numbers separated by spaces or tabs."""
    match = _STONES_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected stone numbers")
    return [int(number) for number in match.group().split()]


def stone_tick(stone: int) -> tuple[int, int | None]:
    """The stone or pair of stones that one blink turns stone into."""
    if stone == 0:
        return 1, None
    digits = len(str(stone))
    if digits % 2 == 0:
        divisor = 10 ** (digits // 2)
        return stone // divisor, stone % divisor
    return stone * 2024, None


def stone_count_after_ticks(stone: int, ticks: int, cache: dict[tuple[int, int], int]) -> int:
    """How many stones a single stone becomes after the given number of blinks."""
    if ticks == 0:
        return 1
    key = (stone, ticks)
    if key in cache:
        return cache[key]

    left, right = stone_tick(stone)
    count = stone_count_after_ticks(left, ticks - 1, cache)
    if right is not None:
        count += stone_count_after_ticks(right, ticks - 1, cache)
    cache[key] = count
    return count


def _count(text: str, ticks: int) -> int:
    cache: dict[tuple[int, int], int] = {}
    return sum(stone_count_after_ticks(stone, ticks, cache) for stone in parse_input(text))


def part1(text: str) -> int:
    """Number of stones after 25 blinks."""
    return _count(text, 25)


def part2(text: str) -> int:
    """Number of stones after 75 blinks."""
    return _count(text, 75)