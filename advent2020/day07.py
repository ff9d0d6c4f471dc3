"""Handy haversacks: follow the rules of which bags hold which."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

TARGET_COLOR = "shiny gold"

_CONTAINER = re.compile(
    r"(?P<color>[a-z]+ [a-z]+) bags contain "
    r"(?P<contents>no other bags|[0-9]+ [a-z]+ [a-z]+ bags?(?:, [0-9]+ [a-z]+ [a-z]+ bags?)*)\."
)
_CONTAINED = re.compile(r"(?P<count>[0-9]+) (?P<color>[a-z]+ [a-z]+)")


@dataclass
class Bag:
    """A bag colour with the bags it holds and the bags holding it."""

    color: str
    contains: dict[str, int] = field(default_factory=dict)
    contained_by: dict[str, int] = field(default_factory=dict)


def parse_input(text: str) -> dict[str, Bag]:
    """Parse the rules into bags keyed by colour, linked both ways."""
    bags: dict[str, Bag] = {}
    for line in text.splitlines():
        match = _CONTAINER.fullmatch(line)
        if match is None:
            raise ValueError(f"Couldn't parse input line : {line}")
        color = match["color"]
        bag = bags.setdefault(color, Bag(color))
        contents = match["contents"]
        if contents == "no other bags":
            continue
        for inner in _CONTAINED.finditer(contents):
            inner_color = inner["color"]
            if inner_color in bag.contains:
                raise ValueError(
                    f"Current bag already contains this bag color : {color} => {inner_color}"
                )
            bag.contains[inner_color] = int(inner["count"])

    for color, bag in list(bags.items()):
        for inner_color, count in bag.contains.items():
            inner_bag = bags.setdefault(inner_color, Bag(inner_color))
            if color in inner_bag.contained_by:
                raise ValueError(
                    "Current bag already is already contained by this bag color : "
                    f"{inner_color} => {color}"
                )
            inner_bag.contained_by[color] = count
    return bags


def _target(bags: Mapping[str, Bag]) -> Bag:
    try:
        return bags[TARGET_COLOR]
    except KeyError:
        raise ValueError("Couldn't find the shiny gold bag !") from None


def part_1(bags: Mapping[str, Bag]) -> int:
    """Number of bag colours that can eventually hold a shiny gold bag."""
    to_check = list(_target(bags).contained_by)
    checked: set[str] = set()
    while to_check:
        color = to_check.pop()
        if color in checked:
            continue
        checked.add(color)
        if color not in bags:
            raise ValueError(f"Couldn't find a container bag : {color}")
        to_check.extend(bags[color].contained_by)
    return len(checked)


def part_2(bags: Mapping[str, Bag]) -> int:
    """Number of bags held inside one shiny gold bag."""
    to_check = list(_target(bags).contains.items())
    total = 0
    while to_check:
        color, count = to_check.pop()
        if color not in bags:
            raise ValueError(f"Couldn't find a container bag : {color}")
        total += count
        to_check.extend(
            (inner, inner_count * count)
            for inner, inner_count in bags[color].contains.items()
        )
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        bags = parse_input(sys.stdin.read())
        print(f"Part 1 : {part_1(bags)}")
        print(f"Part 2 : {part_2(bags)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())