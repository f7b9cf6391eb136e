"""2023 day 2: games of coloured cubes drawn from a bag."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from pathlib import Path

from aocsolutions.utils import read_lines

DEFAULT_PATH = Path("../data/2023/day02.txt")

MAX_COLORS = {"red": 12, "green": 13, "blue": 14}


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    return part1(lines), part2(lines)


def _parse_game(line: str) -> tuple[int, Iterator[tuple[int, str]]]:
    header, _, body = line.partition(": ")
    game_id = int(header.split(" ")[1])

    def hands() -> Iterator[tuple[int, str]]:
        for round_ in body.split("; "):
            for hand in round_.split(", "):
                count, color = hand.split(" ")[:2]
                yield int(count), color

    return game_id, hands()


def _possible(hands: Iterable[tuple[int, str]]) -> bool:
    for count, color in hands:
        if color not in MAX_COLORS:
            raise ValueError(f"invalid color: {color!r}")
        if count > MAX_COLORS[color]:
            return False
    return True


def part1(lines: Iterable[str]) -> int:
    """Sum the ids of games possible with the bag's cube limits."""
    total = 0
    for line in lines:
        game_id, hands = _parse_game(line)
        if _possible(hands):
            total += game_id
    return total


def part2(lines: Iterable[str]) -> int:
    """Sum the powers of the minimum cube sets needed for each game."""
    total = 0
    for line in lines:
        _, hands = _parse_game(line)
        minimum = dict.fromkeys(MAX_COLORS, 0)
        for count, color in hands:
            minimum[color] = max(count, minimum.get(color, 0))
        total += math.prod(minimum[color] for color in MAX_COLORS)
    return total