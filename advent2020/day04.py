"""Passport processing: count passports with required and valid fields."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

FIELDS = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid", "cid")
REQUIRED_FIELDS = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid")
EYE_COLORS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})

_UNSIGNED = re.compile(r"\+?[0-9]+")
_HEIGHT = re.compile(r"(?P<height>[0-9]{2,3})(?P<unit>cm|in)")
_COLOR = re.compile(r"#[0-9a-f]{6}")
_HEIGHT_LIMITS = {"cm": (150, 193), "in": (59, 76)}


def _number_between(value: str | None, low: int, high: int) -> bool:
    if value is None or not _UNSIGNED.fullmatch(value):
        return False
    return low <= int(value) <= high


@dataclass
class Passport:
    """A passport; each field is ``None`` when absent."""

    byr: str | None = None
    iyr: str | None = None
    eyr: str | None = None
    hgt: str | None = None
    hcl: str | None = None
    ecl: str | None = None
    pid: str | None = None
    cid: str | None = None

    def has_required_fields(self) -> bool:
        """Every field except ``cid`` is present."""
        return all(getattr(self, name) is not None for name in REQUIRED_FIELDS)

    def _height_is_valid(self) -> bool:
        if self.hgt is None:
            return False
        match = _HEIGHT.fullmatch(self.hgt)
        if match is None:
            return False
        low, high = _HEIGHT_LIMITS[match["unit"]]
        return low <= int(match["height"]) <= high

    def is_valid(self) -> bool:
        """Every required field is present and holds an acceptable value."""
        return (
            _number_between(self.byr, 1920, 2002)
            and _number_between(self.iyr, 2010, 2020)
            and _number_between(self.eyr, 2020, 2030)
            and self._height_is_valid()
            and self.hcl is not None
            and _COLOR.fullmatch(self.hcl) is not None
            and self.ecl in EYE_COLORS
            and self.pid is not None
            and len(self.pid) == 9
            and _UNSIGNED.fullmatch(self.pid) is not None
        )


def parse_input(text: str) -> list[Passport]:
    """Parse passports separated by blank lines into ``key:value`` fields."""
    passports: list[Passport] = []
    fields: dict[str, str] = {}
    for line in text.splitlines():
        if not line:
            passports.append(Passport(**fields))
            fields = {}
            continue
        for token in line.split(" "):
            parts = token.split(":")
            if len(parts) != 2:
                raise ValueError(f"Invalid input : {token}")
            key, value = parts
            if key not in FIELDS:
                raise ValueError(f"Invalid passport key found : {token}")
            fields[key] = value
    passports.append(Passport(**fields))
    return passports


def part_1(passports: Iterable[Passport]) -> int:
    """Number of passports holding every required field."""
    return sum(passport.has_required_fields() for passport in passports)


def part_2(passports: Iterable[Passport]) -> int:
    """Number of passports whose required fields are all valid."""
    return sum(passport.is_valid() for passport in passports)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        passports = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(passports)}")
    print(f"Part 2 : {part_2(passports)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())