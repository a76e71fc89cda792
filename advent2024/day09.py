"""Disk compaction: moving file blocks into free space and checksumming."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class File:
    """A file of the given id occupying size blocks."""

    id: int
    size: int


@dataclass(frozen=True)
class Free:
    """A run of free blocks."""

    size: int


@dataclass(frozen=True)
class CompressedFile:
    """A file entry in the dense disk map."""

    size: int


@dataclass(frozen=True)
class CompressedFree:
    """A free-space entry in the dense disk map."""

    size: int


Node = File | Free
CompressedNode = CompressedFile | CompressedFree


def parse_input(text: str) -> list[CompressedNode]:
    """Parse the dense disk map; digits alternate between files and free space."""
    match = _DIGITS_PATTERN.match(text)
    if match is None:
        raise ValueError("Failed to parse input: expected digits")
    return [
        CompressedFile(int(d)) if i % 2 == 0 else CompressedFree(int(d))
        for i, d in enumerate(match.group())
    ]


def expand_disk_map(compressed_disk_map: list[CompressedNode]) -> list[Node]:
    """Give each file its id, numbered in order of appearance."""
    expanded: list[Node] = []
    file_id = 0
    for node in compressed_disk_map:
        if isinstance(node, CompressedFile):
            expanded.append(File(file_id, node.size))
            file_id += 1
        else:
            expanded.append(Free(node.size))
    return expanded


def _relocate_whole(disk_map: list[Node], left: int, right: int, file: File) -> int:
    """Move file into the first free run that fits it; return the updated right index."""
    sub = left
    while sub < right:
        item = disk_map[sub]
        if isinstance(item, File):
            sub += 1
        elif item.size == file.size:
            disk_map[sub] = file
            disk_map[right] = Free(item.size)
            break
        elif item.size > file.size:
            disk_map.insert(sub, file)
            right += 1
            disk_map[right] = Free(file.size)
            sub += 1
            disk_map[sub] = Free(item.size - file.size)
            break
        else:
            sub += 1
    return right


def defrag_disk(disk_map: list[Node], split_files: bool) -> None:
    """Compact the disk in place, splitting files across gaps if split_files."""
    left = 0
    right = len(disk_map) - 1

    while left < right:
        node = disk_map[left]
        if isinstance(node, File):
            left += 1
            continue

        free_space = node.size
        last = disk_map[right]
        if isinstance(last, Free):
            right -= 1
        elif last.size < free_space:
            disk_map.insert(left, last)
            right += 1
            disk_map[right] = Free(last.size)
            left += 1
            disk_map[left] = Free(free_space - last.size)
        elif last.size == free_space:
            disk_map[left] = last
            disk_map[right] = Free(last.size)
            left += 1
            right -= 1
        elif split_files:
            disk_map[left] = File(last.id, free_space)
            disk_map[right] = File(last.id, last.size - free_space)
            left += 1
        else:
            right = _relocate_whole(disk_map, left, right, last) - 1


def calculate_checksum(disk_map: list[Node]) -> int:
    """Sum of block position times file id over every file block."""
    position = 0
    checksum = 0
    for node in disk_map:
        if isinstance(node, File):
            checksum += node.id * sum(range(position, position + node.size))
        position += node.size
    return checksum


def _compact(text: str, split_files: bool) -> int:
    disk_map = expand_disk_map(parse_input(text))
    defrag_disk(disk_map, split_files)
    return calculate_checksum(disk_map)


def part1(text: str) -> int:
    """Checksum after compacting block by block."""
    return _compact(text, True)


def part2(text: str) -> int:
    """Checksum after moving whole files."""
    return _compact(text, False)