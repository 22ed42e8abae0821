"""Day 1: compare two columns of location IDs."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Sequence


def parse_columns(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated integers into two columns."""
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"line {number}: expected two numbers, got {line!r}")
        a, b = (int(field) for field in fields)
        left.append(a)
        right.append(b)
    return left, right


def total_distance(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of distances between the columns once both are sorted."""
    return sum(
        abs(a - b) for a, b in zip(sorted(left), sorted(right), strict=True)
    )


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of each left value times how often it occurs on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Historian location lists.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return 1
    left, right = parse_columns(text)
    if args.part == 1:
        print(total_distance(left, right))
    else:
        print(similarity_score(left, right))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())