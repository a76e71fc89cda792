import pytest

from advent2024.day09 import (
    CompressedFile,
    CompressedFree,
    File,
    Free,
    calculate_checksum,
    defrag_disk,
    expand_disk_map,
    parse_input,
    part1,
    part2,
)

TEST_INPUT = "2333133121414131402\n"


def test_part1():
    assert part1(TEST_INPUT) == 1928


def test_part2():
    assert part2(TEST_INPUT) == 2858


def test_part1_small_example():
    assert part1("12345") == 60


def test_parse_input():
    assert parse_input("12345") == [
        CompressedFile(1),
        CompressedFree(2),
        CompressedFile(3),
        CompressedFree(4),
        CompressedFile(5),
    ]


def test_parse_input_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_input("abc")


def test_expand_disk_map():
    disk_map = [
        CompressedFile(1),
        CompressedFree(2),
        CompressedFile(3),
        CompressedFree(4),
        CompressedFile(5),
    ]
    assert expand_disk_map(disk_map) == [
        File(0, 1),
        Free(2),
        File(1, 3),
        Free(4),
        File(2, 5),
    ]


def test_checksum_unmoved_disk_ignores_free_space():
    assert calculate_checksum([Free(3)]) == 0