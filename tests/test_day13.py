import pytest

from advent2020.day13 import parse_input, part_1, part_2

EXAMPLE = "939\n7,13,x,x,59,x,31,19\n"


def test_parse_input():
    assert parse_input(EXAMPLE) == (939, [7, 13, 1, 1, 59, 1, 31, 19])


def test_part_1():
    earliest, buses = parse_input(EXAMPLE)
    assert part_1(earliest, buses) == 295


def test_part_2():
    _, buses = parse_input(EXAMPLE)
    assert part_2(buses) == 1068781


@pytest.mark.parametrize(
    ("schedule", "expected"),
    [
        ("17,x,13,19", 3417),
        ("67,7,59,61", 754018),
        ("67,x,7,59,61", 779210),
        ("67,7,x,59,61", 1261476),
        ("1789,37,47,1889", 1202161486),
    ],
)
def test_part_2_schedules(schedule, expected):
    _, buses = parse_input(f"0\n{schedule}\n")
    assert part_2(buses) == expected


def test_part_2_result_satisfies_offsets():
    _, buses = parse_input(EXAMPLE)
    time = part_2(buses)
    assert all((time + offset) % bus == 0 for offset, bus in enumerate(buses))


def test_part_1_without_buses():
    with pytest.raises(ValueError, match="Could not find a minimum"):
        part_1(939, [1, 1])


def test_invalid_bus_id():
    with pytest.raises(ValueError):
        parse_input("939\n7,y,13\n")