"""Encoding error: find the number that breaks the XMAS cipher."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from collections.abc import Sequence
from itertools import combinations

PREAMBLE = 25

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"invalid unsigned integer: {token!r}")
    return int(token)


def parse_input(text: str) -> list[int]:
    """Parse one number per line."""
    return [_parse_unsigned(line) for line in text.splitlines()]


def _is_sum_of_pair(window: Sequence[int], number: int) -> bool:
    return any(a != b and a + b == number for a, b in combinations(window, 2))


def part_1(numbers: Sequence[int], preamble: int) -> int:
    """First number that is not the sum of two different recent numbers."""
    if preamble > len(numbers):
        raise ValueError("Not enough numbers for the preamble")
    window = deque(numbers[:preamble], maxlen=preamble)
    for number in numbers[preamble:]:
        if not _is_sum_of_pair(window, number):
            return number
        window.append(number)
    raise ValueError("No combination in error found")


def part_2(numbers: Sequence[int], preamble: int) -> int:
    """Sum of smallest and largest of a contiguous run adding up to part 1."""
    target = part_1(numbers, preamble)
    for start in range(len(numbers) - 1):
        total = numbers[start]
        for end in range(start + 1, len(numbers)):
            total += numbers[end]
            if total > target:
                break
            if total == target:
                run = numbers[start : end + 1]
                return min(run) + max(run)
    raise ValueError("No contiguous series found")


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        numbers = parse_input(sys.stdin.read())
        print(f"Part 1 : {part_1(numbers, PREAMBLE)}")
        print(f"Part 2 : {part_2(numbers, PREAMBLE)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())