"""2023 day 4: scratchcards with winning numbers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from aocsolutions.utils import read_lines

DEFAULT_PATH = Path("../data/2023/day04.txt")

_NUMBER = re.compile(r"\d+")


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve the input file at ``path``; the second part has no solution and is 0."""
    return part1(read_lines(path)), 0


def _numbers(text: str) -> list[int]:
    return [n for n in map(int, _NUMBER.findall(text)) if n]


def parse(line: str) -> tuple[list[int], list[int]]:
    """Split a card line into its winning numbers and the numbers held."""
    _, sep, body = line.partition(": ")
    if not sep:
        raise ValueError(f"not a card line: {line!r}")
    winning, bar, held = body.rpartition("|")
    if not bar:
        return [], _numbers(held)
    return _numbers(winning), _numbers(held)


def part1(lines: Iterable[str]) -> int:
    """Sum card scores: one point for the first match, doubled for each more."""
    total = 0
    for line in lines:
        winning, held = parse(line)
        winners = set(winning)
        matches = sum(1 for number in held if number in winners)
        if matches:
            total += 1 << (matches - 1)
    return total