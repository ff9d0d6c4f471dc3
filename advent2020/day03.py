"""Toboggan trajectory: count trees hit on a repeating slope map."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from math import prod

PART_2_SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


@dataclass(frozen=True)
class TreeMap:
    """A map whose pattern repeats endlessly to the right."""

    width: int
    height: int
    trees: frozenset[tuple[int, int]]

    def trees_on_slope(self, right: int, down: int) -> int:
        """Count trees met moving ``right`` and ``down`` from the top left."""
        x = y = 0
        crossed = 0
        while y < self.height - 1:
            x = (x + right) % self.width
            y += down
            if (x, y) in self.trees:
                crossed += 1
        return crossed


def parse_input(text: str) -> TreeMap:
    """Parse a map of ``.`` (open) and ``#`` (tree) squares."""
    trees: set[tuple[int, int]] = set()
    width: int | None = None
    lines = text.splitlines()
    for y, line in enumerate(lines):
        if width is None:
            width = len(line)
        elif len(line) != width:
            raise ValueError("Invalid input: every line should have the same length!")
        for x, character in enumerate(line):
            if character == "#":
                trees.add((x, y))
            elif character != ".":
                raise ValueError(
                    f"Invalid character found while parsing input : {character}"
                )
    if width is None:
        raise ValueError("Input is empty!")
    return TreeMap(width, len(lines), frozenset(trees))


def part_1(tree_map: TreeMap) -> int:
    """Trees hit going right 3, down 1."""
    return tree_map.trees_on_slope(3, 1)


def part_2(tree_map: TreeMap) -> int:
    """Product of the trees hit on each of the five slopes."""
    return prod(tree_map.trees_on_slope(right, down) for right, down in PART_2_SLOPES)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        tree_map = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(tree_map)}")
    print(f"Part 2 : {part_2(tree_map)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())