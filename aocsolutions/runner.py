"""Run the puzzle solutions by year and day and print their answers."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from aocsolutions import (
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
)

SOLUTIONS: dict[int, dict[int, Callable[[], tuple[int, int]]]] = {
    2024: {
        1: y2024_day01.run,
        2: y2024_day02.run,
        3: y2024_day03.run,
        4: y2024_day04.run,
        5: y2024_day05.run,
    },
}


def format_result(year: int, day: int, part1: int, part2: int) -> str:
    """Render one day's answers as a short report block."""
    return f"Year {year}\n\tDay {day}:\n\t\tPart 1: {part1}\n\t\tPart 2: {part2}\n"


def run_day(year: int, day: int) -> str:
    """Solve one day and return its report; KeyError if there is no solution."""
    try:
        solve = SOLUTIONS[year][day]
    except KeyError:
        raise KeyError(f"no solution for year {year} day {day}") from None
    part1, part2 = solve()
    return format_result(year, day, part1, part2)


def run_all() -> str:
    """Solve every known day and return the joined reports."""
    return "".join(
        format_result(year, day, *solve())
        for year, days in SOLUTIONS.items()
        for day, solve in days.items()
    )


def run(year: int, day: int) -> int:
    """Print the report for one day, or all days if either is 0; return an exit status."""
    if year == 0 or day == 0:
        output = run_all()
    else:
        try:
            output = run_day(year, day)
        except KeyError:
            output = ""
    if not output:
        return 1
    print(output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run puzzle solutions.")
    parser.add_argument("-d", type=int, default=0, help="Choose day to execute")
    parser.add_argument("-y", type=int, default=0, help="Choose year to execute")
    args = parser.parse_args(argv)
    return run(args.y, args.d)


if __name__ == "__main__":
    raise SystemExit(main())