import pytest

from advent2020.day12 import Direction, Instruction, Ship, parse_input, part_1, part_2

EXAMPLE = "F10\nN3\nF7\nR90\nF11\n"


def test_part_1_example():
    assert part_1(parse_input(EXAMPLE)) == 25


def test_part_2_example():
    assert part_2(parse_input(EXAMPLE)) == 286


def test_parts_do_not_modify_input():
    ship = parse_input(EXAMPLE)
    part_1(ship)
    part_2(ship)
    assert ship.position == (0, 0)
    assert ship.direction is Direction.EAST


def test_execute_instructions_position():
    ship = parse_input(EXAMPLE)
    ship.execute_instructions()
    assert ship.position == (17, -8)
    assert ship.direction is Direction.SOUTH


def test_execute_with_waypoint_position():
    ship = parse_input(EXAMPLE)
    ship.execute_with_waypoint()
    assert ship.position == (214, -72)
    assert ship.waypoint == (4, -10)


def test_parse_instructions():
    ship = Ship.parse("N3\nL-90\n")
    assert ship.instructions == (Instruction("N", 3), Instruction("L", -90))


@pytest.mark.parametrize("line", ["X5", "F", "Nabc"])
def test_parse_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        Ship.parse(line)


@pytest.mark.parametrize(
    ("angle", "direction"),
    [(0, Direction.EAST), (90, Direction.NORTH), (-90, Direction.SOUTH), (540, Direction.WEST)],
)
def test_direction_from_angle(angle, direction):
    assert Direction.from_angle(angle) is direction


def test_direction_from_bad_angle():
    with pytest.raises(ValueError):
        Direction.from_angle(45)


def test_direction_angle():
    assert Direction.WEST.angle() == 180


@pytest.mark.parametrize(
    ("right", "angle", "expected"),
    [
        (True, 90, (4, -10)),
        (False, 90, (-4, 10)),
        (True, 180, (-10, -4)),
        (False, 270, (4, -10)),
        (True, 360, (10, 4)),
    ],
)
def test_rotated_waypoint(right, angle, expected):
    ship = Ship((), waypoint=(10, 4))
    assert ship.rotated_waypoint(right, angle) == expected


def test_rotated_waypoint_bad_angle():
    with pytest.raises(ValueError):
        Ship(()).rotated_waypoint(True, 45)


def test_turn_by_bad_angle_raises():
    with pytest.raises(ValueError):
        part_1(parse_input("R45\n"))