"""Binary boarding: decode seat codes and find the missing seat."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_ROW_BITS = {"F": "0", "B": "1"}
_COLUMN_BITS = {"L": "0", "R": "1"}


@dataclass(frozen=True, order=True)
class Seat:
    """A seat given by its row and column."""

    row: int
    column: int

    @classmethod
    def parse(cls, code: str) -> Seat:
        """Decode a ten-letter boarding pass such as ``FBFBBFFRLR``."""
        if len(code) != 10:
            raise ValueError("Input line should have a length of 10 chars")
        row_bits = []
        for letter in code[:7]:
            if letter not in _ROW_BITS:
                raise ValueError(
                    f"Invalid character found while determining row : {letter}"
                )
            row_bits.append(_ROW_BITS[letter])
        column_bits = []
        for letter in code[7:]:
            if letter not in _COLUMN_BITS:
                raise ValueError(
                    f"Invalid character found while determining column : {letter}"
                )
            column_bits.append(_COLUMN_BITS[letter])
        return cls(int("".join(row_bits), 2), int("".join(column_bits), 2))

    @property
    def seat_id(self) -> int:
        """Row times eight plus column."""
        return self.row * 8 + self.column


def parse_input(text: str) -> list[Seat]:
    """Parse one boarding pass per line."""
    return [Seat.parse(line) for line in text.splitlines()]


def part_1(seats: Iterable[Seat]) -> int:
    """Highest seat id."""
    ids = [seat.seat_id for seat in seats]
    if not ids:
        raise ValueError("Input is empty!")
    return max(ids)


def part_2(seats: Iterable[Seat]) -> int:
    """Id of the one missing seat between occupied ones."""
    ids = [seat.seat_id for seat in sorted(seats)]
    for previous, current in zip(ids, ids[1:]):
        if current != previous + 1:
            return current - 1
    raise ValueError("Couldn't find santa's seat!")


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        seats = parse_input(sys.stdin.read())
        print(f"Part 1 : {part_1(seats)}")
        print(f"Part 2 : {part_2(seats)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())