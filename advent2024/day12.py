"""Garden plots: fencing prices by perimeter and by number of sides."""

from __future__ import annotations

import re
from collections import defaultdict, deque
from collections.abc import Sequence

_MAP_PATTERN = re.compile(r"[A-Z]+(?:\n[A-Z]+)*")

Coordinate = tuple[int, int]
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_input(text: str) -> list[str]:
    """Parse the leading block of rows of capital letters."""
    match = _MAP_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected rows of capital letters")
    return match.group().split("\n")


def map_out_plot(plot_map: Sequence[Sequence[str]], pos: Coordinate) -> set[Coordinate]:
    """Every coordinate in the region containing pos."""
    plot_id = plot_map[pos[0]][pos[1]]
    height, width = len(plot_map), len(plot_map[0])
    plot: set[Coordinate] = set()
    queue = deque([pos])

    while queue:
        y, x = queue.popleft()
        if (y, x) in plot or plot_map[y][x] != plot_id:
            continue
        plot.add((y, x))
        for dy, dx in _NEIGHBOURS:
            ny, nx = y + dy, x + dx
            if 0 <= ny < height and 0 <= nx < width:
                queue.append((ny, nx))

    return plot


def find_plots(plot_map: Sequence[Sequence[str]]) -> list[set[Coordinate]]:
    """All regions of the map, in reading order of their first cell."""
    plots: list[set[Coordinate]] = []
    seen: set[Coordinate] = set()
    for y, row in enumerate(plot_map):
        for x in range(len(row)):
            if (y, x) in seen:
                continue
            plot = map_out_plot(plot_map, (y, x))
            seen |= plot
            plots.append(plot)
    return plots


def count_plot_edges(plot: set[Coordinate], plot_map: Sequence[Sequence[str]]) -> int:
    """Perimeter of a region: cell sides not shared with another cell of it."""
    return sum(
        (y + dy, x + dx) not in plot for y, x in plot for dy, dx in _NEIGHBOURS
    )


def _runs(values: list[int]) -> int:
    ordered = sorted(values)
    return 1 + sum(b - a > 1 for a, b in zip(ordered, ordered[1:]))


def count_plot_sides(plot: set[Coordinate], plot_map: Sequence[Sequence[str]]) -> int:
    """Number of straight sides of a region's fence."""
    above: dict[int, list[int]] = defaultdict(list)
    below: dict[int, list[int]] = defaultdict(list)
    left: dict[int, list[int]] = defaultdict(list)
    right: dict[int, list[int]] = defaultdict(list)

    for y, x in plot:
        if (y - 1, x) not in plot:
            above[y].append(x)
        if (y + 1, x) not in plot:
            below[y].append(x)
        if (y, x - 1) not in plot:
            left[x].append(y)
        if (y, x + 1) not in plot:
            right[x].append(y)

    return sum(
        _runs(values)
        for lines in (above, below, left, right)
        for values in lines.values()
    )


def part1(text: str) -> int:
    """Fence price using area times perimeter."""
    plot_map = parse_input(text)
    return sum(len(plot) * count_plot_edges(plot, plot_map) for plot in find_plots(plot_map))


def part2(text: str) -> int:
    """Fence price using area times number of sides."""
    plot_map = parse_input(text)
    return sum(len(plot) * count_plot_sides(plot, plot_map) for plot in find_plots(plot_map))