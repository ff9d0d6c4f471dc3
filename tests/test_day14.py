import io

import pytest

from advent2020.day14 import Mask, Mem, System, main, parse_input, part_1, part_2

EXAMPLE = """\
mask = XXXXXXXXXXXXXXXXXXXXXXXXXXXXX1XXXX0X
mem[8] = 11
mem[7] = 101
mem[8] = 0
"""

EXAMPLE_2 = """\
mask = 000000000000000000000000000000X1001X
mem[42] = 100
mask = 00000000000000000000000000000000X0XX
mem[26] = 1
"""


def test_part_1():
    assert part_1(parse_input(EXAMPLE)) == 165


def test_part_2():
    assert part_2(parse_input(EXAMPLE_2)) == 208


def test_parse_commands():
    system = System.parse(EXAMPLE)
    assert system.program == (
        Mask("XXXXXXXXXXXXXXXXXXXXXXXXXXXXX1XXXX0X"),
        Mem(8, 11),
        Mem(7, 101),
        Mem(8, 0),
    )


def test_masked_values_written():
    system = System.parse(
        "mask = XXXXXXXXXXXXXXXXXXXXXXXXXXXXX1XXXX0X\nmem[8] = 11\nmem[7] = 101\n"
    )
    system.execute_program(False)
    assert system.memory == {8: 73, 7: 101}


def test_masked_zero_becomes_64():
    system = System.parse("mask = XXXXXXXXXXXXXXXXXXXXXXXXXXXXX1XXXX0X\nmem[8] = 0\n")
    system.execute_program(False)
    assert system.memory == {8: 64}


def test_decoded_addresses():
    system = System.parse(EXAMPLE_2.splitlines()[0] + "\n" + EXAMPLE_2.splitlines()[1])
    system.execute_program(True)
    assert system.memory == {26: 100, 27: 100, 58: 100, 59: 100}


def test_parts_do_not_change_input():
    system = parse_input(EXAMPLE)
    part_1(system)
    assert system.memory == {}
    assert system.mask == "X" * 36


@pytest.mark.parametrize(
    "line",
    ["mask = 12", "mem[1] = XXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX", "mem[a] = 3", "foo"],
)
def test_invalid_lines(line):
    with pytest.raises(ValueError):
        parse_input(line)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE_2))
    assert main([]) == 0
    assert "Part 2 : 208" in capsys.readouterr().out


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("garbage\n"))
    assert main([]) == 1
    assert "Couldn't parse input" in capsys.readouterr().err