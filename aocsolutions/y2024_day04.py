"""2024 day 4: word search for XMAS."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

DEFAULT_PATH = Path("../data/2024/day04.txt")

_DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve both parts for the input file at ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    return part1(text), part2(text)


def parse(text: str) -> list[str]:
    """Split the puzzle into grid rows, dropping empty lines."""
    return [line for line in text.split("\n") if line]


def _inside(grid: Sequence[str], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def is_pattern(
    grid: Sequence[str], row: int, col: int, drow: int, dcol: int, pattern: str
) -> bool:
    """True if ``pattern`` reads from (row, col) in direction (drow, dcol)."""
    if not _inside(grid, row, col):
        raise IndexError(f"start ({row}, {col}) is outside the grid")
    last = len(pattern) - 1
    if not _inside(grid, row + last * drow, col + last * dcol):
        return False
    return all(
        grid[row + step * drow][col + step * dcol] == char
        for step, char in enumerate(pattern)
    )


def is_x_pattern(grid: Sequence[str], row: int, col: int, pattern: str) -> bool:
    """True if ``pattern`` crosses itself diagonally, centred on (row, col)."""
    half = max(len(pattern) - 1, 0) // 2
    if not (_inside(grid, row - half, col - half) and _inside(grid, row + half, col + half)):
        return False
    falling = is_pattern(grid, row - half, col - half, 1, 1, pattern) or is_pattern(
        grid, row + half, col + half, -1, -1, pattern
    )
    if not falling:
        return False
    return is_pattern(grid, row + half, col - half, -1, 1, pattern) or is_pattern(
        grid, row - half, col + half, 1, -1, pattern
    )


def part1(text: str) -> int:
    """Count XMAS in every direction."""
    grid = parse(text)
    return sum(
        1
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "X"
        for drow, dcol in _DIRECTIONS
        if is_pattern(grid, row, col, drow, dcol, "XMAS")
    )


def part2(text: str) -> int:
    """Count the MAS crosses."""
    grid = parse(text)
    return sum(
        1
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "A" and is_x_pattern(grid, row, col, "MAS")
    )