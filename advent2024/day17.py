"""Chronospatial computer: a three-bit machine and a search for a self-printing input."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field

_REGISTER_PATTERN = re.compile(r"Register ([ABC]): (\d+)")
_PROGRAM_PATTERN = re.compile(r"Program: (\d+(?:,\d+)*)")
_REGISTER = r"Register [ABC]: \d+"
_INPUT_PATTERN = re.compile(
    rf"(?P<registers>{_REGISTER}(?:\n{_REGISTER})*)\n+(?P<program>Program: \d+(?:,\d+)*)"
)


@dataclass
class Cpu:
    """Registers, instruction pointer, program and collected output."""

    a: int
    b: int
    c: int
    program: list[int]
    ip: int = 0
    output: list[int] = field(default_factory=list)

    def _fetch(self) -> int:
        if not 0 <= self.ip < len(self.program):
            raise IndexError("Invalid instruction pointer")
        value = self.program[self.ip]
        self.ip += 1
        return value

    def _combo(self) -> int:
        value = self._fetch()
        if value <= 3:
            return value
        if value == 4:
            return self.a
        if value == 5:
            return self.b
        if value == 6:
            return self.c
        if value == 7:
            raise ValueError("Combo operand 7 is reserved")
        raise ValueError(f"Invalid combo operand {value}")

    def step(self) -> None:
        """Execute one instruction; IndexError when the pointer leaves the program."""
        opcode = self._fetch()
        if opcode == 0:
            self.a >>= self._combo()
        elif opcode == 1:
            self.b ^= self._fetch()
        elif opcode == 2:
            self.b = self._combo() % 8
        elif opcode == 3:
            if self.a > 0:
                self.ip = self._fetch()
        elif opcode == 4:
            self.b ^= self.c
            self.ip += 1
        elif opcode == 5:
            self.output.append(self._combo() % 8)
        elif opcode == 6:
            self.b = self.a >> self._combo()
        elif opcode == 7:
            self.c = self.a >> self._combo()
        else:
            raise ValueError(f"Invalid opcode {opcode}")

    def run(self) -> None:
        """Execute instructions until the program halts."""
        try:
            while True:
                self.step()
        except IndexError:
            pass


def parse_register(text: str) -> tuple[str, int]:
    """Parse a 'Register X: n' line into its name and value."""
    match = _REGISTER_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a register at {text[:20]!r}")
    return match[1], int(match[2])


def parse_program(text: str) -> list[int]:
    """Parse a 'Program: a,b,...' line into its numbers."""
    match = _PROGRAM_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a program at {text[:20]!r}")
    return [int(n) for n in match[1].split(",")]


def parse_input(text: str) -> Cpu:
    """Parse registers and program; registers not given start at 0."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected registers and a program")
    registers = dict(parse_register(line) for line in match["registers"].split("\n"))
    return Cpu(
        registers.get("A", 0),
        registers.get("B", 0),
        registers.get("C", 0),
        parse_program(match["program"]),
    )


def reverse_match_count(a: list[int], b: list[int]) -> tuple[int, bool]:
    """How many values match in a row from the back, and whether all of b matched."""
    count = 0
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            break
        count += 1
    return count, count == len(b)


def part1(text: str) -> str:
    """The program's output joined with commas."""
    cpu = parse_input(text)
    cpu.run()
    return ",".join(str(value) for value in cpu.output)


def part2(text: str) -> int:
    """The lowest register A found that makes the program output itself."""
    cpu = parse_input(text)
    a = 0
    max_end_match = 0
    while True:
        trial = dataclasses.replace(cpu, a=a, ip=0, output=[])
        trial.run()
        count, full = reverse_match_count(trial.output, trial.program)
        if full:
            return a
        if count > max_end_match:
            max_end_match = count
            a *= 8
        else:
            a += 1