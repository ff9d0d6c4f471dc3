"""Rain risk: steer the ferry by instructions, with and without a waypoint."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

_NUMBER = re.compile(r"[+-]?[0-9]+")
_ACTIONS = frozenset("NESWFRL")
_MOVES = {"N": (0, 1), "E": (1, 0), "S": (0, -1), "W": (-1, 0)}


class Direction(Enum):
    """A compass heading, valued by its angle in degrees."""

    EAST = 0
    NORTH = 90
    WEST = 180
    SOUTH = 270

    @classmethod
    def from_angle(cls, angle: int) -> Direction:
        """Heading for an angle, taken modulo 360."""
        angle %= 360
        try:
            return cls(angle)
        except ValueError:
            raise ValueError(f"Angle could not determine a direction : {angle}") from None

    def angle(self) -> int:
        """The heading's angle in degrees."""
        return self.value


@dataclass(frozen=True)
class Instruction:
    """An action letter and its value."""

    action: str
    value: int


@dataclass
class Ship:
    """The ferry with its heading, position, waypoint and instructions."""

    instructions: tuple[Instruction, ...]
    direction: Direction = Direction.EAST
    position: tuple[int, int] = (0, 0)
    waypoint: tuple[int, int] = (10, 1)

    @classmethod
    def parse(cls, text: str) -> Ship:
        """Parse one instruction per line, such as ``F10``."""
        instructions = []
        for line in text.splitlines():
            if not _NUMBER.fullmatch(line[1:]):
                raise ValueError(f"Couldn't parse instruction value : {line}")
            action = line[:1]
            if action not in _ACTIONS:
                raise ValueError(f"Invalid instruction char : {action}")
            instructions.append(Instruction(action, int(line[1:])))
        return cls(tuple(instructions))

    @property
    def distance(self) -> int:
        """Manhattan distance from the starting point."""
        return abs(self.position[0]) + abs(self.position[1])

    def _moved(self, point: tuple[int, int], step: tuple[int, int], times: int) -> tuple[int, int]:
        return point[0] + step[0] * times, point[1] + step[1] * times

    def execute_instructions(self) -> None:
        """Move the ship itself by every instruction."""
        for instruction in self.instructions:
            action, value = instruction.action, instruction.value
            if action in _MOVES:
                self.position = self._moved(self.position, _MOVES[action], value)
            elif action == "F":
                heading = _MOVES["NESW"[[90, 0, 270, 180].index(self.direction.angle())]]
                self.position = self._moved(self.position, heading, value)
            elif action == "L":
                self.direction = Direction.from_angle(self.direction.angle() + value)
            else:
                self.direction = Direction.from_angle(self.direction.angle() - value)

    def execute_with_waypoint(self) -> None:
        """Move the waypoint by every instruction; ``F`` moves the ship to it."""
        for instruction in self.instructions:
            action, value = instruction.action, instruction.value
            if action in _MOVES:
                self.waypoint = self._moved(self.waypoint, _MOVES[action], value)
            elif action == "F":
                self.position = self._moved(self.position, self.waypoint, max(value, 0))
            else:
                self.waypoint = self.rotated_waypoint(action == "R", value)

    def rotated_waypoint(self, rotate_right: bool, angle: int) -> tuple[int, int]:
        """Waypoint turned around the ship by a multiple of 90 degrees."""
        if rotate_right:
            angle = -angle
        remainder = abs(angle) % 360
        angle = -remainder if angle < 0 else remainder
        x, y = self.waypoint
        if angle == 0:
            return x, y
        if angle in (-270, 90):
            return -y, x
        if angle in (-180, 180):
            return -x, -y
        if angle in (-90, 270):
            return y, -x
        raise ValueError(f"Invalid angle found : {angle}")


def parse_input(text: str) -> Ship:
    """Parse the navigation instructions."""
    return Ship.parse(text)


def part_1(ship: Ship) -> int:
    """Distance travelled when instructions move the ship."""
    voyage = replace(ship)
    voyage.execute_instructions()
    return voyage.distance


def part_2(ship: Ship) -> int:
    """Distance travelled when instructions move the waypoint."""
    voyage = replace(ship)
    voyage.execute_with_waypoint()
    return voyage.distance


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        ship = parse_input(sys.stdin.read())
        print(f"Part 1 : {part_1(ship)}")
        print(f"Part 2 : {part_2(ship)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())