"""Helpers for reading puzzle input files and converting their fields."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

_INTEGER = re.compile(r"[+-]?\d+")


def _strip_newline(line: str) -> str:
    line = line.removesuffix("\n")
    return line.removesuffix("\r")


def iter_lines(path: str | Path) -> Iterator[str]:
    """Yield the lines of a file one at a time, without line endings.

    The file is opened as soon as this is called, so a missing file
    raises straight away rather than on first iteration.
    """
    handle = open(path, encoding="utf-8")

    def _lines() -> Iterator[str]:
        with handle:
            for line in handle:
                yield _strip_newline(line)

    return _lines()


def read_lines(path: str | Path) -> list[str]:
    """Return every line of a file, without line endings."""
    return list(iter_lines(path))


def to_ints(values: Iterable[str]) -> list[int]:
    """Convert decimal strings to integers, raising ValueError on bad input."""
    result = []
    for value in values:
        if not _INTEGER.fullmatch(value):
            raise ValueError(f"invalid integer: {value!r}")
        result.append(int(value))
    return result