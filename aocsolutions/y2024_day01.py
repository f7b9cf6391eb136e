"""2024 day 1: compare two lists of location ids."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from aocsolutions.utils import read_lines, to_ints

DEFAULT_PATH = Path("../data/2024/day01.txt")

_SEPARATOR = "   "


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    return part1(lines), part2(lines)


def _pair(line: str) -> tuple[int, int]:
    fields = line.split(_SEPARATOR)
    if len(fields) < 2:
        raise ValueError(f"expected two columns: {line!r}")
    left, right = to_ints(fields[:2])
    return left, right


def part1(lines: Iterable[str]) -> int:
    """Sum the distances between the two lists once both are sorted."""
    pairs = [_pair(line) for line in lines]
    if not pairs:
        return 0
    lefts = sorted(left for left, _ in pairs)
    rights = sorted(right for _, right in pairs)
    return sum(abs(left - right) for left, right in zip(lefts, rights))


def part2(lines: Iterable[str]) -> int:
    """Sum each left id times how often it appears in the right list."""
    lefts: list[int] = []
    rights: Counter[int] = Counter()
    for line in lines:
        left, right = _pair(line)
        lefts.append(left)
        rights[right] += 1
    return sum(left * rights[left] for left in lefts)