# advent2020

Solutions to the first seventeen puzzles of Advent of Code 2020.

Every day reads its puzzle input from standard input and prints the answers
to both parts:

```
Part 1 : <answer>
Part 2 : <answer>
```

## Installation

```
pip install .
```

## Running a day

Each day has its own command, `advent2020-dayNN`, where `NN` is the
two-digit day number from `01` to `17`:

```
advent2020-day01 < input.txt
advent2020-day08 < input.txt
advent2020-day17 < input.txt
```

The commands take no options besides `--help`. Day 9 uses a preamble of 25
numbers.

If the input cannot be parsed, or a puzzle has no answer for it, the command
prints `Error: ...` to standard error and exits with status 1.

## Using the solutions from Python

Every day lives in its own module, `advent2020.day01` to `advent2020.day17`,
and offers the same three functions: `parse_input(text)` turns the raw
puzzle text into the day's data, and `part_1` and `part_2` compute the
answers from it. `part_1` and `part_2` do not change the data they are given,
so both can be called on the same parsed input.

```python
from advent2020 import day01, day09, day15

with open("input.txt") as handle:
    expenses = day01.parse_input(handle.read())
print(day01.part_1(expenses), day01.part_2(expenses))

with open("numbers.txt") as handle:
    numbers = day09.parse_input(handle.read())
print(day09.part_1(numbers, 25), day09.part_2(numbers, 25))

print(day15.execute_turns(day15.parse_input("0,3,6"), 10))
```

Some days expose the types behind their data, for example
`day02.PasswordRule`, `day05.Seat`, `day08.Processor`, `day11.Seats`,
`day12.Ship`, `day14.System`, `day16.TicketRule` and
`day17.PocketDimension`.

Invalid input, or input for which a puzzle has no answer, raises
`ValueError`. On day 8, a program that jumps outside its instructions raises
`IndexError` from `Processor.step`.

## Running the tests

```
pip install ".[test]"
pytest
```