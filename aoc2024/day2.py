"""Day 2: check reactor reports for safe level changes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

_MAX_STEP = 3


def parse_reports(text: str) -> list[list[int]]:
    """One report per non-blank line, levels separated by whitespace."""
    return [[int(field) for field in line.split()] for line in text.splitlines() if line.strip()]


def _steps_within(levels: Sequence[int], descending: bool) -> bool:
    for a, b in zip(levels, levels[1:]):
        step = a - b if descending else b - a
        if not 1 <= step <= _MAX_STEP:
            return False
    return True


def is_safe(levels: Sequence[int]) -> bool:
    """True when levels strictly rise or strictly fall by 1 to 3 each step."""
    return _steps_within(levels, descending=True) or _steps_within(levels, descending=False)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True when the report is safe, or becomes safe after dropping one level."""
    if is_safe(levels):
        return True
    return any(is_safe([*levels[:i], *levels[i + 1:]]) for i in range(len(levels)))


def count_safe(reports: Iterable[Sequence[int]]) -> int:
    """Number of safe reports."""
    return sum(1 for report in reports if is_safe(report))


def count_safe_with_dampener(reports: Iterable[Sequence[int]]) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(1 for report in reports if is_safe_with_dampener(report))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Red-nosed reactor reports.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            reports = parse_reports(handle.read())
    except OSError:
        return 1
    if args.part == 1:
        valid = count_safe(reports)
    else:
        valid = count_safe_with_dampener(reports)
    print(f"SAFE REPORTS : {valid}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())