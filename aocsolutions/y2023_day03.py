"""2023 day 3: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Sequence
from pathlib import Path

from aocsolutions.utils import read_lines

DEFAULT_PATH = Path("../data/2023/day03.txt")

_NEIGHBOURS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]

# A symbol: its character and its row and column.
_Symbol = tuple[str, int, int]


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    return part1(lines), part2(lines)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_symbol(char: str) -> bool:
    return not _is_digit(char) and char != "."


def _numbers_by_symbol(lines: Sequence[str]) -> dict[_Symbol, list[int]]:
    """Map each symbol to the numbers that touch it, in reading order."""
    found: dict[_Symbol, list[int]] = defaultdict(list)
    number = 0
    touching: set[_Symbol] = set()

    def flush() -> None:
        nonlocal number
        if number:
            for symbol in touching:
                found[symbol].append(number)
        touching.clear()
        number = 0

    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if not _is_digit(char):
                flush()
                continue
            number = number * 10 + int(char)
            for dr, dc in _NEIGHBOURS:
                r, c = row + dr, col + dc
                if 0 <= r < len(lines) and 0 <= c < len(lines[r]):
                    neighbour = lines[r][c]
                    if _is_symbol(neighbour):
                        touching.add((neighbour, r, c))
        flush()
    return found


def part1(lines: Sequence[str]) -> int:
    """Sum every number adjacent to a symbol, once per touching symbol."""
    return sum(sum(numbers) for numbers in _numbers_by_symbol(lines).values())


def part2(lines: Sequence[str]) -> int:
    """Sum the gear ratios of '*' symbols touching exactly two numbers."""
    return sum(
        math.prod(numbers)
        for (char, _, _), numbers in _numbers_by_symbol(lines).items()
        if char == "*" and len(numbers) == 2
    )