"""2024 day 5: page ordering rules for print updates."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key
from itertools import pairwise
from pathlib import Path

from aocsolutions.utils import read_lines, to_ints

DEFAULT_PATH = Path("../data/2024/day05.txt")

Rules = dict[tuple[int, int], bool]


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    return part1(lines), part2(lines)


def _atoi(text: str) -> int:
    try:
        return to_ints([text])[0]
    except ValueError:
        return 0


def parse_rules(lines: Sequence[str]) -> tuple[Rules, int]:
    """Read the rules up to the first blank line.

    Returns the rules, mapping (a, b) to True when a must come before b
    and (b, a) to False, and the index of the first update line.
    """
    rules: Rules = {}
    index = 0
    while index < len(lines) and lines[index] != "":
        fields = lines[index].split("|")
        if len(fields) < 2:
            raise ValueError(f"not a rule: {lines[index]!r}")
        a, b = _atoi(fields[0]), _atoi(fields[1])
        rules[(a, b)] = True
        rules[(b, a)] = False
        index += 1
    return rules, index + 1


def _in_order(rules: Rules, pages: Sequence[int]) -> bool:
    return not any(rules.get((later, earlier), False) for earlier, later in pairwise(pages))


def _updates(lines: Sequence[str]) -> tuple[Rules, list[list[int]]]:
    rules, start = parse_rules(lines)
    return rules, [to_ints(line.split(",")) for line in lines[start:]]


def part1(lines: Sequence[str]) -> int:
    """Sum the middle pages of updates already in order."""
    rules, updates = _updates(lines)
    return sum(pages[len(pages) // 2] for pages in updates if _in_order(rules, pages))


def part2(lines: Sequence[str]) -> int:
    """Sum the middle pages of out-of-order updates once they are sorted."""
    rules, updates = _updates(lines)

    def compare(a: int, b: int) -> int:
        if rules.get((a, b), False):
            return -1
        if rules.get((b, a), False):
            return 1
        return 0

    total = 0
    for pages in updates:
        if not _in_order(rules, pages):
            ordered = sorted(pages, key=cmp_to_key(compare))
            total += ordered[len(ordered) // 2]
    return total