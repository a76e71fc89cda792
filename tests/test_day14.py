import pytest

from advent2024.day14 import (
    iterations_for_unique_positions,
    parse_input,
    parse_state,
    part2,
    position_after,
    safety_rating,
)


def test_parse_state():
    assert parse_state("p=1,2 v=3,4") == ((1, 2), (3, 4))


def test_parse_input():
    assert parse_input("p=1,2 v=3,-2\np=4,5 v=6,7") == [
        ((1, 2), (3, -2)),
        ((4, 5), (6, 7)),
    ]


def test_parse_input_rejects_garbage():
    with pytest.raises(ValueError):
        parse_input("p=1 v=2")


def test_position_after_wraps():
    assert position_after(11, 7, 5, (2, 4), (2, -3)) == (1, 3)


def test_position_after_zero_iterations_is_start():
    assert position_after(11, 7, 0, (3, 6), (5, -9)) == (3, 6)


def test_safety_rating_one_robot_per_quadrant():
    states = [((0, 0), (0, 0)), ((0, 6), (0, 0)), ((4, 0), (0, 0)), ((4, 6), (0, 0))]
    assert safety_rating(11, 7, 0, states) == 1


def test_safety_rating_counts_multiplied():
    states = [
        ((0, 0), (0, 0)),
        ((0, 0), (0, 0)),
        ((0, 6), (0, 0)),
        ((4, 0), (0, 0)),
        ((4, 6), (0, 0)),
    ]
    assert safety_rating(11, 7, 0, states) == 2


def test_safety_rating_empty_quadrant_is_zero():
    states = [((0, 0), (0, 0)), ((0, 6), (0, 0)), ((4, 0), (0, 0))]
    assert safety_rating(11, 7, 0, states) == 0


def test_iterations_already_unique_is_one():
    states = [((0, 0), (0, 0)), ((1, 0), (0, 0))]
    assert iterations_for_unique_positions(11, 7, states) == 1


def test_iterations_waits_past_collision():
    states = [((0, 0), (1, 0)), ((1, 0), (0, 0))]
    assert iterations_for_unique_positions(11, 7, states) == 2


def test_part2_single_robot():
    assert part2("p=0,0 v=1,1") == 1