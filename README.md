# aocsolutions

Solutions to Advent of Code puzzles from 2023 and 2024. Each day is its own
module. Its solving functions take the puzzle input, either as lines or as
the whole text, and return an integer.

## Installation

```
pip install .
```

To run the tests, install the test extra instead:

```
pip install ".[test]"
pytest
```

## Command line

The `aocsolutions` command runs the 2024 solutions and prints both parts
for each day:

```
aocsolutions              # every registered day
aocsolutions -y 2024 -d 3
```

If either `-y` or `-d` is left out or is 0, every registered day is run.
Puzzle inputs are read from `../data/<year>/dayNN.txt`, relative to the
current working directory. Asking for a day that has no registered
solution ends the command with exit status 1.

## Library use

```python
from aocsolutions import y2024_day02

reports = ["7 6 4 2 1", "1 2 7 8 9"]
print(y2024_day02.part1(reports))  # 1
```

Every day module has `run(path)`, which reads the input file at `path`
(by default `../data/<year>/dayNN.txt`) and returns both answers as a tuple.

Modules and their functions:

- `y2023_day01`, `y2023_day02`, `y2023_day03`: `part1(lines)`, `part2(lines)`
- `y2023_day04`: `parse(line)`, `part1(lines)`
- `y2024_day01`: `part1(lines)`, `part2(lines)`
- `y2024_day02`: `is_valid(nums)`, `part1(lines)`, `part2(lines)`
- `y2024_day03`: `part1(text)`, `part2(text)`
- `y2024_day04`: `parse(text)`, `is_pattern(...)`, `is_x_pattern(...)`,
  `part1(text)`, `part2(text)`
- `y2024_day05`: `parse_rules(lines)`, `part1(lines)`, `part2(lines)`
- `utils`: `iter_lines(path)`, `read_lines(path)` and `to_ints(values)` for
  reading input
- `runner`: `format_result`, `run_day`, `run_all`, `run` and `main`

`runner.run_day` raises `KeyError` for a year and day with no registered
solution.

## What it does not do

- The command only runs the 2024 days; the 2023 modules are used from
  Python.
- 2023 day 4 has no second part; its `run` returns 0 in that place.
- Puzzle inputs are not downloaded; they must already be on disk.