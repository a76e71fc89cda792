"""Towel arrangements: counting ways to build stripe patterns from towels."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

_STRIPES = r"[wubrg]+"
_STRIPES_PATTERN = re.compile(_STRIPES)
_INPUT_PATTERN = re.compile(
    rf"(?P<towels>{_STRIPES}(?:, {_STRIPES})*)\n\n(?P<patterns>{_STRIPES}(?:\n{_STRIPES})*)"
)


class Colour(Enum):
    WHITE = "w"
    BLUE = "u"
    BLACK = "b"
    RED = "r"
    GREEN = "g"


Pattern = list[Colour]


@dataclass
class PatternTrie:
    """A prefix tree of towel patterns."""

    children: dict[Colour, PatternTrie] = field(default_factory=dict)
    end: bool = False

    def insert(self, pattern: Pattern) -> None:
        """Add a towel pattern to the trie."""
        current = self
        for colour in pattern:
            current = current.children.setdefault(colour, PatternTrie())
        current.end = True

    def options_count(self, pattern: Pattern, cache: dict[str, int]) -> int:
        """How many ways the pattern can be built from the towels in the trie."""
        key = "".join(colour.value for colour in pattern)
        if key in cache:
            return cache[key]

        count = 0
        options: list[PatternTrie] = [self]
        for idx, colour in enumerate(pattern):
            options = [trie.children[colour] for trie in options if colour in trie.children]
            ends = sum(trie.end for trie in options)
            rest = pattern[idx + 1:]
            if rest:
                count += self.options_count(rest, cache) * ends

        total = count + sum(trie.end for trie in options)
        cache[key] = total
        return total


def parse_stripes(text: str) -> tuple[Pattern, str]:
    """Parse a run of stripe colours at the start of text; return it and the rest."""
    match = _STRIPES_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected stripes at {text[:20]!r}")
    return [Colour(c) for c in match.group()], text[match.end():]


def parse_input(text: str) -> tuple[list[Pattern], list[Pattern]]:
    """Parse the towels and the wanted patterns, separated by a blank line."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected towels and patterns")
    towels = [[Colour(c) for c in towel] for towel in match["towels"].split(", ")]
    patterns = [[Colour(c) for c in line] for line in match["patterns"].split("\n")]
    return towels, patterns


def _counts(text: str) -> list[int]:
    towels, patterns = parse_input(text)
    trie = PatternTrie()
    for towel in towels:
        trie.insert(towel)
    cache: dict[str, int] = {}
    return [trie.options_count(pattern, cache) for pattern in patterns]


def part1(text: str) -> int:
    """Number of patterns that can be built at all."""
    return sum(1 for count in _counts(text) if count > 0)


def part2(text: str) -> int:
    """Total number of ways to build every pattern."""
    return sum(_counts(text))