"""Shuttle search: earliest bus, and the earliest aligned departures."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from math import prod

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"invalid unsigned integer: {token!r}")
    return int(token)


def parse_input(text: str) -> tuple[int, list[int]]:
    """Parse the earliest time and the bus ids; ``x`` becomes 1."""
    earliest = 0
    buses: list[int] = []
    for index, line in enumerate(text.splitlines()):
        if index == 0:
            earliest = _parse_unsigned(line)
            continue
        buses.extend(1 if bus == "x" else _parse_unsigned(bus) for bus in line.split(","))
    return earliest, buses


def part_1(earliest_depart_time: int, buses: Sequence[int]) -> int:
    """Id of the first bus to leave times the minutes waited for it."""
    waits = [
        (bus, bus - earliest_depart_time % bus) for bus in buses if bus != 1
    ]
    if not waits:
        raise ValueError("Could not find a minimum, is the input empty?")
    bus, waiting = min(waits, key=lambda pair: pair[1])
    return bus * waiting


def part_2(buses: Sequence[int]) -> int:
    """Earliest time each bus leaves at its offset in the list.

    Uses the Chinese remainder theorem, so the ids must be pairwise coprime.
    """
    modulus = prod(buses)
    total = 0
    for offset, bus in enumerate(reversed(buses)):
        factor = modulus // bus
        multiple = 1
        while factor * multiple % bus != offset % bus:
            multiple += 1
        total += factor * multiple
    return total % modulus - len(buses) + 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        earliest, buses = parse_input(sys.stdin.read())
        print(f"Part 1 : {part_1(earliest, buses)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 2 : {part_2(buses)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())