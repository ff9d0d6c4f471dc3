import pytest

from advent2020.day15 import execute_turns, parse_input, part_1, part_2

EXAMPLE = "0,3,6"


def test_execute_ten_turns():
    assert execute_turns(parse_input(EXAMPLE), 10) == 0


def test_part_2():
    assert part_2(parse_input(EXAMPLE)) == 175594


@pytest.mark.parametrize(
    ("turn", "expected"),
    [(4, 0), (5, 3), (6, 3), (7, 1), (8, 0), (9, 4)],
)
def test_early_turns(turn, expected):
    assert execute_turns([0, 3, 6], turn) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("0,3,6", 436), ("1,3,2", 1), ("2,1,3", 10), ("1,2,3", 27), ("3,1,2", 1836)],
)
def test_part_1(text, expected):
    assert part_1(parse_input(text)) == expected


def test_final_turn_within_start_returns_last_start():
    assert execute_turns([7, 8, 9], 2) == 9


def test_parse_input():
    assert parse_input("0,3,6") == [0, 3, 6]


def test_parse_rejects_bad_token():
    with pytest.raises(ValueError):
        parse_input("0,x,6")