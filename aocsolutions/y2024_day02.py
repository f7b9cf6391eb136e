"""2024 day 2: safety of reactor level reports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise
from pathlib import Path

from aocsolutions.utils import read_lines, to_ints

DEFAULT_PATH = Path("../data/2024/day02.txt")


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    return part1(lines), part2(lines)


def is_valid(nums: Sequence[int]) -> bool:
    """True if the levels move in one direction by steps of 1 to 3."""
    steps = [b - a for a, b in pairwise(nums)]
    if not all(1 <= abs(step) <= 3 for step in steps):
        return False
    return all(step >= 0 for step in steps) or all(step <= 0 for step in steps)


def _report(line: str) -> list[int]:
    return to_ints(line.split(" "))


def part1(lines: Iterable[str]) -> int:
    """Count the reports that are safe as they stand."""
    return sum(1 for line in lines if is_valid(_report(line)))


def _tolerable(nums: list[int]) -> bool:
    return any(
        is_valid(nums[:skip] + nums[skip + 1 :]) for skip in range(len(nums))
    )


def part2(lines: Iterable[str]) -> int:
    """Count the reports that are safe once a single level is removed."""
    return sum(1 for line in lines if _tolerable(_report(line)))