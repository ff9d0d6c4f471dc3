"""Handheld halting: run the boot code and repair its infinite loop."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

_LINE = re.compile(r"(?P<operation>jmp|acc|nop) (?P<argument>[+-][0-9]+)")


class Operation(Enum):
    """A boot code operation."""

    NOP = "nop"
    ACC = "acc"
    JMP = "jmp"


@dataclass
class Processor:
    """A program with its instruction pointer and accumulator."""

    program: tuple[tuple[Operation, int], ...]
    position: int = 0
    accumulator: int = 0

    @classmethod
    def parse(cls, text: str) -> Processor:
        """Parse one ``operation argument`` per line."""
        program = []
        for line in text.splitlines():
            match = _LINE.fullmatch(line)
            if match is None:
                raise ValueError(f"Couldn't parse input : {line}")
            program.append((Operation(match["operation"]), int(match["argument"])))
        return cls(tuple(program))

    def step(self) -> None:
        """Execute the instruction at the current position."""
        if self.position < 0:
            raise IndexError(
                f"Program current position can't be negative : {self.position}"
            )
        if self.position >= len(self.program):
            raise IndexError(
                f"Program is out of bounds : Accumulator = {self.accumulator}; "
                f"Position = {self.position}"
            )
        operation, argument = self.program[self.position]
        if operation is Operation.JMP:
            self.position += argument
            return
        if operation is Operation.ACC:
            self.accumulator += argument
        self.position += 1

    def is_terminated(self) -> bool:
        """The position is just past the last instruction."""
        return self.position == len(self.program)


def parse_input(text: str) -> Processor:
    """Parse the boot code."""
    return Processor.parse(text)


def part_1(processor: Processor) -> int:
    """Accumulator value just before any instruction runs a second time."""
    running = replace(processor)
    executed: set[int] = set()
    while running.position not in executed:
        executed.add(running.position)
        running.step()
    return running.accumulator


_SWAPS = {Operation.NOP: Operation.JMP, Operation.JMP: Operation.NOP}


def _terminates(processor: Processor) -> bool:
    executed: set[int] = set()
    while not processor.is_terminated():
        if processor.position in executed:
            return False
        executed.add(processor.position)
        processor.step()
    return True


def part_2(processor: Processor) -> int:
    """Accumulator after a run that ends, once one nop/jmp is swapped."""
    for index, (operation, argument) in enumerate(processor.program):
        if operation not in _SWAPS:
            continue
        program = list(processor.program)
        program[index] = (_SWAPS[operation], argument)
        candidate = replace(processor, program=tuple(program))
        if _terminates(candidate):
            return candidate.accumulator
    raise ValueError("Couldn't find a swap that lets us finish the program")


def main(argv: Sequence[str] | None = None) -> int:
    """Read the puzzle input from standard input and print both answers."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        processor = parse_input(sys.stdin.read())
        print(f"Part 1 : {part_1(processor)}")
        print(f"Part 2 : {part_2(processor)}")
    except (ValueError, IndexError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())