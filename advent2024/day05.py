"""Print queue: checking and fixing page orders against ordering rules."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from functools import cmp_to_key

PageOrder = tuple[int, int]
PageList = list[int]

_ORDER = r"\d+\|\d+"
_LIST = r"\d+(?:,\d+)*"
_ORDER_PATTERN = re.compile(r"(\d+)\|(\d+)")
_LIST_PATTERN = re.compile(_LIST)
_INPUT_PATTERN = re.compile(
    rf"(?P<orders>{_ORDER}(?:\n{_ORDER})*)\n\n(?P<lists>{_LIST}(?:\n{_LIST})*)"
)


def parse_page_order(text: str) -> PageOrder:
    """Parse an ordering rule of the form 'before|after'."""
    match = _ORDER_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a page order at {text[:20]!r}")
    return int(match[1]), int(match[2])


def parse_page_list(text: str) -> PageList:
    """Parse a comma separated list of pages."""
    match = _LIST_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Expected a page list at {text[:20]!r}")
    return [int(page) for page in match.group().split(",")]


def parse_input(text: str) -> tuple[list[PageOrder], list[PageList]]:
    """Parse the ordering rules and the page lists, separated by a blank line."""
    match = _INPUT_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected page orders and page lists")
    orders = [parse_page_order(line) for line in match["orders"].split("\n")]
    lists = [parse_page_list(line) for line in match["lists"].split("\n")]
    return orders, lists


def page_before_map(page_orders: Iterable[PageOrder]) -> dict[int, set[int]]:
    """Map each page to the set of pages that must come after it."""
    before: dict[int, set[int]] = {}
    for first, after in page_orders:
        before.setdefault(first, set()).add(after)
    return before


def _is_ordered(pages: Sequence[int], before: Mapping[int, set[int]]) -> bool:
    seen: set[int] = set()
    for page in pages:
        if before.get(page, set()) & seen:
            return False
        seen.add(page)
    return True


def _middle(pages: Sequence[int]) -> int:
    return pages[len(pages) // 2]


def part1(text: str) -> int:
    """Sum of the middle pages of the correctly ordered lists."""
    orders, lists = parse_input(text)
    before = page_before_map(orders)
    return sum(_middle(pages) for pages in lists if _is_ordered(pages, before))


def part2(text: str) -> int:
    """Sum of the middle pages of the incorrectly ordered lists once fixed."""
    orders, lists = parse_input(text)
    before = page_before_map(orders)

    def compare(a: int, b: int) -> int:
        if b in before.get(a, ()):
            return -1
        if a in before.get(b, ()):
            return 1
        return 0

    return sum(
        _middle(sorted(pages, key=cmp_to_key(compare)))
        for pages in lists
        if not _is_ordered(pages, before)
    )