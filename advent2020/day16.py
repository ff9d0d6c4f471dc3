"""Ticket translation: find invalid tickets and work out field positions."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

_RULE = re.compile(
    r"(?P<rule>[a-z ]+): (?P<n1>[0-9]+)-(?P<n2>[0-9]+) or (?P<n3>[0-9]+)-(?P<n4>[0-9]+)"
)
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class TicketRule:
    """A field rule made of two inclusive ranges."""

    first: tuple[int, int]
    second: tuple[int, int]

    def matches(self, number: int) -> bool:
        """The number lies in either range."""
        return (
            self.first[0] <= number <= self.first[1]
            or self.second[0] <= number <= self.second[1]
        )


def _parse_unsigned(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"invalid unsigned integer: {token!r}")
    return int(token)


def _parse_ticket(line: str) -> list[int]:
    return [_parse_unsigned(token) for token in line.split(",")]


def _parse_rules(block: str) -> dict[str, TicketRule]:
    rules: dict[str, TicketRule] = {}
    for line in block.splitlines():
        match = _RULE.fullmatch(line)
        if match is None:
            raise ValueError(f"Couldn't parse input : {line}")
        name = match["rule"]
        if name in rules:
            raise ValueError(f"Ticket rule is defined twice : {name}")
        rules[name] = TicketRule(
            (int(match["n1"]), int(match["n2"])), (int(match["n3"]), int(match["n4"]))
        )
    return rules


def parse_input(text: str) -> tuple[dict[str, TicketRule], list[int], list[list[int]]]:
    """Parse the rules, your ticket and the nearby tickets."""
    rules: dict[str, TicketRule] = {}
    my_ticket: list[int] = []
    nearby: list[list[int]] = []
    for index, block in enumerate(text.split("\n\n")):
        if index == 0:
            rules = _parse_rules(block)
        elif index == 1:
            lines = block.splitlines()
            if len(lines) > 2:
                raise ValueError("Input invalid : my ticket have too many lines")
            if len(lines) == 2:
                my_ticket = _parse_ticket(lines[1])
        elif index == 2:
            nearby = [_parse_ticket(line) for line in block.splitlines()[1:]]
        else:
            raise ValueError("Invalid input")
    return rules, my_ticket, nearby


def _matches_any(rules: Iterable[TicketRule], number: int) -> bool:
    return any(rule.matches(number) for rule in rules)


def part_1(rules: Mapping[str, TicketRule], nearby_tickets: Iterable[Sequence[int]]) -> int:
    """Sum of the values that no rule accepts."""
    return sum(
        number
        for ticket in nearby_tickets
        for number in ticket
        if not _matches_any(rules.values(), number)
    )


def part_2(
    rules: Mapping[str, TicketRule],
    my_ticket: Sequence[int],
    nearby_tickets: Iterable[Sequence[int]],
) -> int:
    """Product of your ticket's values in the fields starting with ``departure``."""
    valid = [
        ticket
        for ticket in nearby_tickets
        if all(_matches_any(rules.values(), number) for number in ticket)
    ]

    possible: dict[str, list[int]] = {}
    for name, rule in rules.items():
        invalid = {
            position
            for ticket in valid
            for position, number in enumerate(ticket)
            if not rule.matches(number)
        }
        possible[name] = [p for p in range(len(my_ticket)) if p not in invalid]

    result = 1
    while True:
        last_found: int | None = None
        for name, positions in possible.items():
            if len(positions) == 1:
                last_found = positions[0]
                if name.startswith("departure"):
                    result *= my_ticket[last_found]
        if last_found is None:
            return result
        possible = {
            name: [p for p in positions if p != last_found]
            for name, positions in possible.items()
        }


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        rules, my_ticket, nearby = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(rules, nearby)}")
    print(f"Part 2 : {part_2(rules, my_ticket, nearby)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())