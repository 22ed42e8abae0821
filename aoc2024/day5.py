"""Day 5: check and repair the page order of safety manual updates."""

from __future__ import annotations

import argparse
from collections.abc import Collection, Iterable, Sequence

Rule = tuple[int, int]


def parse_manual(text: str) -> tuple[set[Rule], list[list[int]]]:
    """Split the input into ordering rules ``a|b`` and comma-separated updates.

    A blank line separates the rules from the updates.
    """
    rules: set[Rule] = set()
    updates: list[list[int]] = []
    in_updates = False
    for number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            in_updates = True
            continue
        if not in_updates:
            before, sep, after = line.partition("|")
            if not sep:
                raise ValueError(f"line {number}: expected a rule a|b, got {line!r}")
            rules.add((int(before), int(after)))
        else:
            updates.append([int(field) for field in line.split(",")])
    return rules, updates


def is_ordered(rules: Collection[Rule], update: Sequence[int]) -> bool:
    """True when every earlier page is required by a rule to precede every later one."""
    return all(
        (earlier, later) in rules
        for i, earlier in enumerate(update)
        for later in update[i + 1:]
    )


def reorder(rules: Collection[Rule], update: Sequence[int]) -> list[int]:
    """Pages sorted by how many other pages in the update must come before them."""
    return sorted(
        update,
        key=lambda page: sum(1 for other in update if (other, page) in rules),
    )


def middle_value(update: Sequence[int]) -> int:
    """The middle page; the left one of the two middles for an even length."""
    if not update:
        raise ValueError("an empty update has no middle page")
    return update[(len(update) - 1) // 2]


def sum_ordered_middles(rules: Collection[Rule], updates: Iterable[Sequence[int]]) -> int:
    """Sum of middle pages of the updates that are already correctly ordered."""
    return sum(middle_value(update) for update in updates if is_ordered(rules, update))


def sum_reordered_middles(rules: Collection[Rule], updates: Iterable[Sequence[int]]) -> int:
    """Sum of middle pages of the misordered updates after they are repaired."""
    return sum(
        middle_value(reorder(rules, update))
        for update in updates
        if not is_ordered(rules, update)
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print queue.")
    parser.add_argument("path", nargs="?", default="day_5/input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            rules, updates = parse_manual(handle.read())
    except OSError:
        return 1
    print(f"Part one result : {sum_ordered_middles(rules, updates)}")
    print(f"Part two result : {sum_reordered_middles(rules, updates)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())