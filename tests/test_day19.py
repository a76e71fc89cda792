import pytest

from advent2024.day19 import (
    Colour,
    PatternTrie,
    parse_input,
    parse_stripes,
    part1,
    part2,
)

TEST_INPUT = "\n".join(
    [
        "r, wr, b, g, bwu, rb, gb, br",
        "",
        "brwrr",
        "bggr",
        "gbbr",
        "rrbgbr",
        "ubwu",
        "bwurrg",
        "brgr",
        "bbrwb",
    ]
)

W, U, B, R, G = Colour.WHITE, Colour.BLUE, Colour.BLACK, Colour.RED, Colour.GREEN


def test_part1():
    assert part1(TEST_INPUT) == 6


def test_part2():
    assert part2(TEST_INPUT) == 16


def test_parse_stripes():
    assert parse_stripes("w") == ([W], "")
    assert parse_stripes("wbu") == ([W, B, U], "")


def test_parse_stripes_rejects_unknown_colour():
    with pytest.raises(ValueError):
        parse_stripes("x")


def test_parse_input():
    assert parse_input("w, wbu\n\nw\nwbu") == (
        [[W], [W, B, U]],
        [[W], [W, B, U]],
    )


def test_parse_input_needs_blank_line():
    with pytest.raises(ValueError):
        parse_input("w, wbu\nw")


def test_trie_options_count():
    trie = PatternTrie()
    for towel in ([R], [B], [R, B]):
        trie.insert(towel)
    assert trie.options_count([R, B], {}) == 2
    assert trie.options_count([G], {}) == 0


def test_trie_insert_marks_end():
    trie = PatternTrie()
    trie.insert([W, U])
    assert not trie.children[W].end
    assert trie.children[W].children[U].end