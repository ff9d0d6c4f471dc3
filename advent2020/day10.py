"""Adapter array: chain joltage adapters and count the arrangements."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from itertools import pairwise

_UNSIGNED = re.compile(r"\+?[0-9]+")

# Arrangements of a run of consecutive differences of 1, keyed by run length.
_RUN_ARRANGEMENTS = {0: 1, 1: 1, 2: 2, 3: 4, 4: 7}


def _parse_unsigned(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"invalid unsigned integer: {token!r}")
    return int(token)


def parse_input(text: str) -> list[int]:
    """Parse one adapter rating per line and return them sorted."""
    return sorted(_parse_unsigned(line) for line in text.splitlines())


def _differences(adapters: Sequence[int]) -> list[int]:
    return [current - previous for previous, current in pairwise([0, *adapters])]


def part_1(adapters: Sequence[int]) -> int:
    """Number of 1-jolt differences times number of 3-jolt differences.

    The device's built-in adapter adds one 3-jolt difference.
    """
    ones = 0
    threes = 1
    for difference in _differences(adapters):
        if difference == 1:
            ones += 1
        elif difference == 3:
            threes += 1
        elif difference not in (0, 2):
            raise ValueError(
                f"Difference between two adapters can't be greater than 3 : {difference}"
            )
    return ones * threes


def part_2(adapters: Sequence[int]) -> int:
    """Number of distinct adapter arrangements that connect the device."""
    result = 1
    run = 0
    for difference in [*_differences(adapters), 3]:
        if difference == 1:
            run += 1
            continue
        if run not in _RUN_ARRANGEMENTS:
            raise ValueError(
                "Too many consecutive differences of 1 found, need to update the algorithm!"
            )
        result *= _RUN_ARRANGEMENTS[run]
        run = 0
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        adapters = parse_input(sys.stdin.read())
        print(f"Part 1 : {part_1(adapters)}")
        print(f"Part 2 : {part_2(adapters)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())