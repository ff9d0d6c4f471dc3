"""Docking data: run the bitmask program that initialises the ferry's memory."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from itertools import product
from typing import Union

WORD_SIZE = 36

_LINE = re.compile(
    r"(?P<command>mask|mem\[(?P<address>[0-9]+)\]) = "
    r"(?:(?P<mask>[X01]{36})|(?P<value>[0-9]+))"
)


@dataclass(frozen=True)
class Mask:
    """Sets the current 36-character bitmask."""

    bits: str


@dataclass(frozen=True)
class Mem:
    """Writes a value to a memory address."""

    address: int
    value: int


Command = Union[Mask, Mem]


@dataclass
class System:
    """A docking program with its current mask and memory."""

    program: tuple[Command, ...]
    mask: str = "X" * WORD_SIZE
    memory: dict[int, int] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> System:
        """Parse ``mask = ...`` and ``mem[address] = value`` lines."""
        program: list[Command] = []
        for line in text.splitlines():
            match = _LINE.fullmatch(line)
            if match is None:
                raise ValueError(f"Couldn't parse input : {line}")
            if match["command"] == "mask":
                if match["mask"] is None:
                    raise ValueError(f"Invalid input mask : {line}")
                program.append(Mask(match["mask"]))
            else:
                if match["value"] is None:
                    raise ValueError(f"Invalid input memory value : {line}")
                program.append(Mem(int(match["address"]), int(match["value"])))
        return cls(tuple(program))

    def _write_masked_value(self, address: int, value: int) -> None:
        bits = format(value, f"0{WORD_SIZE}b")
        masked = "".join(
            bit if mask_bit == "X" else mask_bit for mask_bit, bit in zip(self.mask, bits)
        )
        self.memory[address] = int(masked, 2)

    def _write_decoded_addresses(self, address: int, value: int) -> None:
        bits = format(address, f"0{WORD_SIZE}b")
        masked = [
            bit if mask_bit == "0" else mask_bit for mask_bit, bit in zip(self.mask, bits)
        ]
        floating = [index for index, bit in enumerate(masked) if bit == "X"]
        for choice in product("01", repeat=len(floating)):
            for index, bit in zip(floating, choice):
                masked[index] = bit
            self.memory[int("".join(masked), 2)] = value

    def execute_program(self, decode_addresses: bool) -> None:
        """Run every command; the mask applies to addresses or to values."""
        for command in self.program:
            if isinstance(command, Mask):
                self.mask = command.bits
            elif decode_addresses:
                self._write_decoded_addresses(command.address, command.value)
            else:
                self._write_masked_value(command.address, command.value)


def parse_input(text: str) -> System:
    """Parse the initialisation program."""
    return System.parse(text)


def _run(system: System, decode_addresses: bool) -> int:
    running = replace(system, memory=dict(system.memory))
    running.execute_program(decode_addresses)
    return sum(running.memory.values())


def part_1(system: System) -> int:
    """Sum of memory after masking the written values."""
    return _run(system, False)


def part_2(system: System) -> int:
    """Sum of memory after decoding the written addresses."""
    return _run(system, True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        system = parse_input(sys.stdin.read())
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Part 1 : {part_1(system)}")
    print(f"Part 2 : {part_2(system)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())