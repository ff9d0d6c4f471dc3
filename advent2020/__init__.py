"""Solutions to the 2020 Advent of Code puzzles, days 1 to 17, one module per day."""

__version__ = "1.0.0"