"""Custom customs: count questions answered within each group."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Group:
    """The answers of each person in a group, one string per person."""

    answers: tuple[str, ...]

    @classmethod
    def parse(cls, block: str) -> Group:
        """Parse one line of lowercase letters per person."""
        answers = []
        for line in block.splitlines():
            for letter in line:
                if not "a" <= letter <= "z":
                    raise ValueError(f"Invalid input : {letter}")
            answers.append(line)
        return cls(tuple(answers))

    def unique_answers(self) -> set[str]:
        """Questions answered by anyone in the group."""
        return set().union(*self.answers)

    def common_answers(self) -> set[str]:
        """Questions answered by everyone in the group."""
        if not self.answers:
            return set()
        first, *rest = self.answers
        counts = dict.fromkeys(first, 1)
        for answer in rest:
            for letter in answer:
                if letter in counts:
                    counts[letter] += 1
        return {letter for letter, count in counts.items() if count == len(self.answers)}


def parse_input(text: str) -> list[Group]:
    """Parse groups separated by blank lines."""
    return [Group.parse(block) for block in text.split("\n\n")]


def part_1(groups: Iterable[Group]) -> int:
    """Sum over groups of questions anyone answered."""
    return sum(len(group.unique_answers()) for group in groups)


def part_2(groups: Iterable[Group]) -> int:
    """Sum over groups of questions everyone answered."""
    return sum(len(group.common_answers()) for group in groups)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        groups = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(groups)}")
    print(f"Part 2 : {part_2(groups)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())