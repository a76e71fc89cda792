"""Corrupted memory: summing the products of valid mul instructions."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MUL_PATTERN = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION_PATTERN = re.compile(r"mul\((?P<a>\d+),(?P<b>\d+)\)|(?P<dont>don't\(\))|(?P<do>do\(\))")


@dataclass(frozen=True)
class Mul:
    """Multiply two numbers."""

    a: int
    b: int


@dataclass(frozen=True)
class Do:
    """Enable later mul instructions."""


@dataclass(frozen=True)
class Dont:
    """Disable later mul instructions."""


Instruction = Mul | Do | Dont


def _to_instruction(match: re.Match[str]) -> Instruction:
    if match["dont"] is not None:
        return Dont()
    if match["do"] is not None:
        return Do()
    return Mul(int(match["a"]), int(match["b"]))


def parse_mul(text: str) -> tuple[Mul, str]:
    """Parse a mul instruction at the start of text; return it and the rest."""
    match = _MUL_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a mul instruction at {text[:20]!r}")
    return Mul(int(match[1]), int(match[2])), text[match.end():]


def parse_instruction(text: str) -> tuple[Instruction, str]:
    """Find the next instruction in text, skipping any garbage before it."""
    match = _INSTRUCTION_PATTERN.search(text)
    if match is None:
        raise ValueError("No instruction found")
    return _to_instruction(match), text[match.end():]


def parse_input(text: str) -> list[Instruction]:
    """Every instruction in the corrupted memory, in order."""
    instructions = [_to_instruction(m) for m in _INSTRUCTION_PATTERN.finditer(text)]
    if not instructions:
        raise ValueError("Failed to parse input: no instructions found")
    return instructions


def part1(text: str) -> int:
    """Sum of the products of every mul instruction."""
    return sum(ins.a * ins.b for ins in parse_input(text) if isinstance(ins, Mul))


def part2(text: str) -> int:
    """Sum of the products of mul instructions that are enabled."""
    enabled = True
    total = 0
    for instruction in parse_input(text):
        if isinstance(instruction, Do):
            enabled = True
        elif isinstance(instruction, Dont):
            enabled = False
        elif enabled:
            total += instruction.a * instruction.b
    return total