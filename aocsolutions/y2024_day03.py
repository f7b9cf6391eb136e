"""2024 day 3: multiplication instructions in corrupted memory."""

from __future__ import annotations

import re
from pathlib import Path

DEFAULT_PATH = Path("../data/2024/day03.txt")

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"(mul|do|don't)\((?:([0-9]+),([0-9]+)|)\)")


def run(path: str | Path = DEFAULT_PATH) -> tuple[int, int]:
    """Solve both parts for the input file at ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    return part1(text), part2(text)


def part1(text: str) -> int:
    """Sum the products of every well-formed mul instruction."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part2(text: str) -> int:
    """Sum mul products, honouring do() and don't() switches."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(text):
        op, a, b = match.groups()
        if op == "do":
            enabled = True
        elif op == "don't":
            enabled = False
        elif enabled:
            if a is None or b is None:
                raise ValueError(f"mul without operands: {match.group(0)!r}")
            total += int(a) * int(b)
    return total