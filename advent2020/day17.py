"""Conway cubes: run the pocket dimension's life rules in three or four dimensions."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import product

TURNS = 6

Point = tuple[int, int, int, int]

_OFFSETS: tuple[Point, ...] = tuple(
    offset for offset in product((-1, 0, 1), repeat=4) if offset != (0, 0, 0, 0)
)
_FLAT_OFFSETS: tuple[Point, ...] = tuple(offset for offset in _OFFSETS if offset[3] == 0)


@dataclass
class PocketDimension:
    """The set of active cubes, addressed by ``(x, y, z, w)``."""

    active: set[Point] = field(default_factory=set)

    def count_active_neighbors(self, x: int, y: int, z: int, w: int) -> int:
        """Active cubes among the 80 neighbours of ``(x, y, z, w)``."""
        return sum(
            (x + dx, y + dy, z + dz, w + dw) in self.active
            for dx, dy, dz, dw in _OFFSETS
        )

    def _step(self, four_dimensional: bool) -> None:
        offsets = _OFFSETS if four_dimensional else _FLAT_OFFSETS
        neighbours: Counter[Point] = Counter(
            (x + dx, y + dy, z + dz, w + dw)
            for x, y, z, w in self.active
            for dx, dy, dz, dw in offsets
        )
        self.active = {
            point
            for point, count in neighbours.items()
            if count == 3 or (count == 2 and point in self.active)
        }

    def execute_turns(self, four_dimensional: bool) -> None:
        """Run six cycles; in three dimensions ``w`` stays at zero."""
        for _ in range(TURNS):
            self._step(four_dimensional)

    def active_count(self) -> int:
        """Number of active cubes."""
        return len(self.active)


def parse_input(text: str) -> PocketDimension:
    """Parse the starting slice of ``.`` (inactive) and ``#`` (active) cubes."""
    active: set[Point] = set()
    for y, line in enumerate(text.splitlines()):
        for x, cell in enumerate(line):
            if cell == "#":
                active.add((x, y, 0, 0))
            elif cell != ".":
                raise ValueError(
                    f"Invalid input, could not determine cell state : {cell}"
                )
    return PocketDimension(active)


def _run(dimension: PocketDimension, four_dimensional: bool) -> int:
    running = PocketDimension(set(dimension.active))
    running.execute_turns(four_dimensional)
    return running.active_count()


def part_1(dimension: PocketDimension) -> int:
    """Active cubes after six cycles in three dimensions."""
    return _run(dimension, False)


def part_2(dimension: PocketDimension) -> int:
    """Active cubes after six cycles in four dimensions."""
    return _run(dimension, True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        dimension = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(dimension)}")
    print(f"Part 2 : {part_2(dimension)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())