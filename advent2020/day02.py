"""Password philosophy: check passwords against their policies."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_RULE = re.compile(
    r"(?P<first>[0-9]+)-(?P<second>[0-9]+) (?P<character>[a-z]): (?P<password>[a-z]+)"
)


@dataclass(frozen=True)
class PasswordRule:
    """A policy line: two numbers, a letter and the password it applies to."""

    first: int
    second: int
    character: str
    password: str

    @classmethod
    def parse(cls, line: str) -> PasswordRule:
        """Parse a line such as ``1-3 a: abcde``."""
        match = _RULE.fullmatch(line)
        if match is None:
            raise ValueError(f"Couldn't parse input: {line}")
        first = int(match["first"])
        second = int(match["second"])
        if first > second:
            raise ValueError(
                f"First number should be less than or equal to second number: {line}"
            )
        return cls(first, second, match["character"], match["password"])

    def is_valid_1(self) -> bool:
        """The letter occurs between ``first`` and ``second`` times."""
        return self.first <= self.password.count(self.character) <= self.second

    def _char_at(self, position: int) -> str | None:
        if 1 <= position <= len(self.password):
            return self.password[position - 1]
        return None

    def is_valid_2(self) -> bool:
        """Exactly one of the two 1-based positions holds the letter."""
        first_char = self._char_at(self.first)
        second_char = self._char_at(self.second)
        return first_char != second_char and self.character in (first_char, second_char)


def parse_input(text: str) -> list[PasswordRule]:
    """Parse one rule per line."""
    return [PasswordRule.parse(line) for line in text.splitlines()]


def part_1(rules: Iterable[PasswordRule]) -> int:
    """Number of passwords valid under the occurrence policy."""
    return sum(rule.is_valid_1() for rule in rules)


def part_2(rules: Iterable[PasswordRule]) -> int:
    """Number of passwords valid under the position policy."""
    return sum(rule.is_valid_2() for rule in rules)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        rules = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(rules)}")
    print(f"Part 2 : {part_2(rules)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())