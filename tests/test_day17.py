import pytest

from advent2024.day17 import (
    Cpu,
    parse_input,
    parse_program,
    parse_register,
    part1,
    part2,
    reverse_match_count,
)

EXAMPLE1 = "\n".join(
    [
        "Register A: 729",
        "Register B: 0",
        "Register C: 0",
        "",
        "Program: 0,1,5,4,3,0",
    ]
)

EXAMPLE2 = "\n".join(
    [
        "Register A: 2024",
        "Register B: 0",
        "Register C: 0",
        "",
        "Program: 0,3,5,4,3,0",
    ]
)


def test_part1():
    assert part1(EXAMPLE1) == "4,6,3,5,6,3,5,2,1,0"


def test_part2():
    assert part2(EXAMPLE2) == 117_440


def test_parse_register():
    assert parse_register("Register A: 1") == ("A", 1)
    assert parse_register("Register B: 2") == ("B", 2)
    assert parse_register("Register C: 321") == ("C", 321)


def test_parse_program():
    assert parse_program("Program: 1,2,3") == [1, 2, 3]


def test_parse_input():
    cpu = parse_input("\n".join(["Register A: 2", "Register B: 15", "", "Program: 1,2,3"]))
    assert cpu.a == 2
    assert cpu.b == 15
    assert cpu.c == 0
    assert cpu.program == [1, 2, 3]


def test_parse_input_rejects_missing_program():
    with pytest.raises(ValueError):
        parse_input("Register A: 2\n")


def test_reverse_match_count():
    assert reverse_match_count([1, 2, 3, 4, 5], [3, 4, 5]) == (3, True)
    assert reverse_match_count([1, 2, 9], [3, 4, 5]) == (0, False)


def test_bst_from_register_c():
    cpu = Cpu(0, 0, 9, [2, 6])
    cpu.run()
    assert cpu.b == 1


def test_out_instructions():
    cpu = Cpu(10, 0, 0, [5, 0, 5, 1, 5, 4])
    cpu.run()
    assert cpu.output == [0, 1, 2]


def test_step_past_end_raises():
    cpu = Cpu(0, 0, 0, [])
    with pytest.raises(IndexError):
        cpu.step()


def test_reserved_combo_operand():
    cpu = Cpu(0, 0, 0, [2, 7])
    with pytest.raises(ValueError):
        cpu.step()