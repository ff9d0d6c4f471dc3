"""Rambunctious recitation: the elves' memory game."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"invalid unsigned integer: {token!r}")
    return int(token)


def parse_input(text: str) -> list[int]:
    """Parse the comma-separated starting numbers."""
    return [_parse_unsigned(token) for token in text.split(",")]


def execute_turns(numbers: Sequence[int], final_turn: int) -> int:
    """Number spoken on turn ``final_turn`` after the starting numbers."""
    last_seen: dict[int, int] = {}
    last_spoken = 0
    for turn, number in enumerate(numbers):
        if turn:
            last_seen[last_spoken] = turn
        last_spoken = number
    for turn in range(len(numbers), final_turn):
        previous = last_seen.get(last_spoken)
        last_seen[last_spoken] = turn
        last_spoken = 0 if previous is None else turn - previous
    return last_spoken


def part_1(numbers: Sequence[int]) -> int:
    """The 2020th number spoken."""
    return execute_turns(numbers, 2020)


def part_2(numbers: Sequence[int]) -> int:
    """The 30000000th number spoken."""
    return execute_turns(numbers, 30_000_000)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        numbers = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(numbers)}")
    print(f"Part 2 : {part_2(numbers)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())