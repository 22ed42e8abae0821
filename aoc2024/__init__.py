"""Solvers for days 1 to 8 of the 2024 Advent of Code puzzles, one module per day."""

__version__ = "0.1.0"