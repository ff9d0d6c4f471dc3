"""Seating system: simulate passengers choosing seats until stable."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

_DIRECTIONS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Cell(Enum):
    """State of one position in the seat layout."""

    FLOOR = "."
    EMPTY = "L"
    OCCUPIED = "#"


@dataclass
class Seats:
    """A seat layout as rows of cells."""

    cells: tuple[tuple[Cell, ...], ...]
    width: int

    @classmethod
    def parse(cls, text: str) -> Seats:
        """Parse rows of ``.``, ``L`` and ``#`` of equal length."""
        rows = []
        width = 0
        for index, line in enumerate(text.splitlines()):
            if index == 0:
                width = len(line)
            elif len(line) != width:
                raise ValueError(
                    "Invalid input : every line should have the same length"
                )
            row = []
            for character in line:
                try:
                    row.append(Cell(character))
                except ValueError:
                    raise ValueError(f"Invalid characted found : {character}") from None
            rows.append(tuple(row))
        return cls(tuple(rows), width)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < len(self.cells)

    def adjacent_occupied(self, x: int, y: int) -> int:
        """Occupied seats among the eight neighbours of ``(x, y)``."""
        return sum(
            self._inside(x + dx, y + dy)
            and self.cells[y + dy][x + dx] is Cell.OCCUPIED
            for dx, dy in _DIRECTIONS
        )

    def visible_occupied(self, x: int, y: int) -> int:
        """Occupied seats first seen from ``(x, y)`` in each of eight directions."""
        visible = 0
        for dx, dy in _DIRECTIONS:
            cx, cy = x + dx, y + dy
            while self._inside(cx, cy):
                cell = self.cells[cy][cx]
                if cell is Cell.OCCUPIED:
                    visible += 1
                    break
                if cell is Cell.EMPTY:
                    break
                cx += dx
                cy += dy
        return visible

    def _next_cell(self, cell: Cell, x: int, y: int, tolerance: int, only_adjacent: bool) -> Cell:
        if cell is Cell.FLOOR:
            return cell
        occupied = (
            self.adjacent_occupied(x, y) if only_adjacent else self.visible_occupied(x, y)
        )
        if cell is Cell.EMPTY and occupied == 0:
            return Cell.OCCUPIED
        if cell is Cell.OCCUPIED and occupied >= tolerance:
            return Cell.EMPTY
        return cell

    def execute_rounds(self, tolerance: int, only_adjacent: bool) -> None:
        """Apply the seating rules until nothing changes."""
        while True:
            new_cells = tuple(
                tuple(
                    self._next_cell(cell, x, y, tolerance, only_adjacent)
                    for x, cell in enumerate(row)
                )
                for y, row in enumerate(self.cells)
            )
            changed = new_cells != self.cells
            self.cells = new_cells
            if not changed:
                return

    def occupied_count(self) -> int:
        """Number of occupied seats."""
        return sum(cell is Cell.OCCUPIED for row in self.cells for cell in row)


def parse_input(text: str) -> Seats:
    """Parse the seat layout."""
    return Seats.parse(text)


def part_1(seats: Seats) -> int:
    """Occupied seats once stable, judging by neighbours with tolerance 4."""
    layout = replace(seats)
    layout.execute_rounds(4, True)
    return layout.occupied_count()


def part_2(seats: Seats) -> int:
    """Occupied seats once stable, judging by line of sight with tolerance 5."""
    layout = replace(seats)
    layout.execute_rounds(5, False)
    return layout.occupied_count()


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        seats = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(seats)}")
    print(f"Part 2 : {part_2(seats)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())