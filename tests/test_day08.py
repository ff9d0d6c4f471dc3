import pytest

from advent2020.day08 import Operation, Processor, parse_input, part_1, part_2

EXAMPLE = """nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6
"""


def test_part_1():
    assert part_1(parse_input(EXAMPLE)) == 5


def test_part_2():
    assert part_2(parse_input(EXAMPLE)) == 8


def test_parts_leave_processor_untouched():
    processor = parse_input(EXAMPLE)
    part_1(processor)
    part_2(processor)
    assert processor.position == 0
    assert processor.accumulator == 0
    assert processor.program[0] == (Operation.NOP, 0)


def test_parse():
    processor = Processor.parse("acc -7\njmp +2\n")
    assert processor.program == ((Operation.ACC, -7), (Operation.JMP, 2))


def test_step_and_termination():
    processor = Processor.parse("acc +3\nnop -1\n")
    processor.step()
    assert processor.accumulator == 3
    assert not processor.is_terminated()
    processor.step()
    assert processor.position == 2
    assert processor.is_terminated()


def test_out_of_bounds():
    with pytest.raises(IndexError, match="out of bounds"):
        part_1(Processor.parse("jmp +5\n"))


def test_negative_position():
    with pytest.raises(IndexError, match="negative"):
        part_1(Processor.parse("jmp -1\n"))


def test_invalid_line():
    with pytest.raises(ValueError, match="Couldn't parse"):
        parse_input("mul +3\n")


def test_no_swap_possible():
    with pytest.raises(ValueError, match="Couldn't find a swap"):
        part_2(Processor.parse("acc +1\n"))