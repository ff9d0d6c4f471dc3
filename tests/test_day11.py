import pytest

from advent2020.day11 import Cell, Seats, parse_input, part_1, part_2

EXAMPLE = """\
L.LL.LL.LL
LLLLLLL.LL
L.L.L..L..
LLLL.LL.LL
L.LL.LL.LL
L.LLLLL.LL
..L.L.....
LLLLLLLLLL
L.LLLLLL.L
L.LLLLL.LL
"""


def test_part_1_example():
    assert part_1(parse_input(EXAMPLE)) == 37


def test_part_2_example():
    assert part_2(parse_input(EXAMPLE)) == 26


def test_parts_do_not_modify_input():
    seats = parse_input(EXAMPLE)
    part_1(seats)
    part_2(seats)
    assert seats.occupied_count() == 0


def test_parse_cells():
    seats = Seats.parse(".L#\n")
    assert seats.width == 3
    assert seats.cells == ((Cell.FLOOR, Cell.EMPTY, Cell.OCCUPIED),)


def test_parse_rejects_uneven_lines():
    with pytest.raises(ValueError):
        Seats.parse("LL\nL\n")


def test_parse_rejects_bad_character():
    with pytest.raises(ValueError):
        Seats.parse("LX\n")


def test_adjacent_occupied():
    seats = Seats.parse(".#.\n#L#\n.#.\n")
    assert seats.adjacent_occupied(1, 1) == 4
    assert seats.adjacent_occupied(0, 0) == 2


def test_visible_occupied_sees_past_floor():
    seats = Seats.parse("#.L.#\n")
    assert seats.visible_occupied(2, 0) == 2
    assert seats.adjacent_occupied(2, 0) == 0


def test_visible_occupied_blocked_by_empty_seat():
    seats = Seats.parse("#LL\n")
    assert seats.visible_occupied(2, 0) == 0


def test_execute_rounds_stabilises():
    seats = Seats.parse("LLL\n")
    seats.execute_rounds(4, True)
    assert seats.occupied_count() == 3