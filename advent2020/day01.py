"""Report repair: find expenses that sum to 2020."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from itertools import combinations
from math import prod

TARGET = 2020

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"invalid unsigned integer: {token!r}")
    return int(token)


def parse_input(text: str) -> list[int]:
    """Parse one expense per line and return them sorted."""
    return sorted(_parse_unsigned(line) for line in text.splitlines())


def _find_combination(expenses: Sequence[int], size: int) -> int | None:
    for combo in combinations(expenses, size):
        if sum(combo) == TARGET:
            return prod(combo)
    return None


def part_1(expenses: Sequence[int]) -> int:
    """Product of the two expenses that sum to 2020."""
    result = _find_combination(expenses, 2)
    if result is None:
        raise ValueError("Part 1 : No combination found!")
    return result


def part_2(expenses: Sequence[int]) -> int:
    """Product of the three expenses that sum to 2020."""
    result = _find_combination(expenses, 3)
    if result is None:
        raise ValueError("Part 2 : No combination found!")
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        expenses = parse_input(sys.stdin.read())
        print(f"Part 1 : {part_1(expenses)}")
        print(f"Part 2 : {part_2(expenses)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())