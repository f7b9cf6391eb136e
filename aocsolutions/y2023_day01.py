"""2023 day 1: recover calibration values from lines of text."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from aocsolutions.utils import read_lines

DEFAULT_PATH = Path("../data/2023/day01.txt")

_SPELLED = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    return part1(lines), part2(lines)


def part1(lines: Iterable[str]) -> int:
    """Sum the two-digit numbers formed by each line's first and last digit."""
    total = 0
    for line in lines:
        digits = [int(char) for char in line if char.isascii() and char.isdigit()]
        if not digits:
            raise ValueError(f"line has no digit: {line!r}")
        total += digits[0] * 10 + digits[-1]
    return total


def _digit_at(line: str, index: int) -> int | None:
    char = line[index]
    if char.isascii() and char.isdigit():
        return int(char)
    for word, value in _SPELLED.items():
        if line.startswith(word, index):
            return value
    return None


def part2(lines: Iterable[str]) -> int:
    """Like part1, but digits may also be spelled out as words."""
    total = 0
    for line in lines:
        positions = range(len(line))
        found = (_digit_at(line, i) for i in positions)
        first = next((d for d in found if d is not None), 0)
        found_back = (_digit_at(line, i) for i in reversed(positions))
        last = next((d for d in found_back if d is not None), 0)
        total += first * 10 + last
    return total