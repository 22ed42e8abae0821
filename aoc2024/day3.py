"""Day 3: recover mul instructions from corrupted memory."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_INSTRUCTION = re.compile(r"do\(\)|don't\(\)|mul\((\d{1,3}),(\d{1,3})\)")


def sum_multiplications(text: str) -> int:
    """Sum of the products of every well-formed mul(a,b)."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def sum_enabled_multiplications(text: str) -> int:
    """Like sum_multiplications, but honouring do() and don't()."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Mull it over.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            data = handle.read()
    except OSError:
        return 1
    if args.part == 1:
        print(f"Matches : {len(_MUL.findall(data))}")
        print(f"Part one result : {sum_multiplications(data)}")
    else:
        print(f"Part two result : {sum_enabled_multiplications(data)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())