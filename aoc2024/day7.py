"""Day 7: find operators that make calibration equations true."""

from __future__ import annotations

import argparse
import operator
from collections.abc import Callable, Iterable, Sequence

Equation = tuple[int, list[int]]


def parse_equations(text: str) -> list[Equation]:
    """Lines of ``target: n1 n2 ...`` as (target, numbers) pairs."""
    equations: list[Equation] = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        target, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"line {number}: expected 'target: numbers', got {line!r}")
        equations.append((int(target), [int(field) for field in rest.split()]))
    return equations


def concat(a: int, b: int) -> int:
    """The digits of a followed by the digits of b."""
    return int(f"{a}{b}")


def _reachable(
    target: int, numbers: Sequence[int], operators: Iterable[Callable[[int, int], int]]
) -> bool:
    if not numbers:
        raise ValueError("an equation needs at least one number")
    ops = tuple(operators)
    # With no zeros left every operator only grows the value, so overshoots can go.
    prune = all(n >= 1 for n in numbers[1:])
    values = {numbers[0]}
    for n in numbers[1:]:
        values = {op(value, n) for value in values for op in ops}
        if prune:
            values = {value for value in values if value <= target}
    return target in values


def solve_with_add_mul(target: int, numbers: Sequence[int]) -> bool:
    """True when + and *, evaluated left to right, can make numbers equal target."""
    return _reachable(target, numbers, (operator.add, operator.mul))


def solve_with_concat(target: int, numbers: Sequence[int]) -> bool:
    """Like solve_with_add_mul, with digit concatenation as a third operator."""
    return _reachable(target, numbers, (operator.add, operator.mul, concat))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bridge repair.")
    parser.add_argument("path", nargs="?", default="day_7/input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            equations = parse_equations(handle.read())
    except OSError:
        return 1
    part_one = sum(t for t, nums in equations if solve_with_add_mul(t, nums))
    part_two = sum(t for t, nums in equations if solve_with_concat(t, nums))
    print(f"Part one result : {part_one}")
    print(f"Part two result : {part_two}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())