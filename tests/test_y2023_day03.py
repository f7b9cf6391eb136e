from aocsolutions.y2023_day03 import part1, part2, run

EXAMPLE = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


def test_part1_example():
    assert part1(EXAMPLE) == 4361


def test_part2_example():
    assert part2(EXAMPLE) == 467835


def test_no_symbols_gives_zero():
    grid = ["123..", "..45."]
    assert part1(grid) == 0
    assert part2(grid) == 0


def test_gear_needs_exactly_two_numbers():
    grid = ["1.2", ".*.", "..3"]
    assert part2(grid) == 0
    assert part1(grid) == 6


def test_run_reads_file(tmp_path):
    path = tmp_path / "day03.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert run(path) == (4361, 467835)