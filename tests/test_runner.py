import pytest

from aocsolutions import runner

DAY01 = ["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]
DAY02 = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]
DAY03 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
DAY04 = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]
DAY05 = [
    "47|53", "97|13", "97|61", "97|47", "75|29", "61|13", "75|53", "29|13",
    "97|29", "53|29", "61|53", "97|53", "61|29", "47|13", "75|47", "97|75",
    "47|61", "75|61", "47|29", "75|13", "53|13", "",
    "75,47,61,53,29", "97,61,53,29,13", "75,29,13",
    "75,97,47,61,53", "61,13,29", "97,13,75,29,47",
]

EXPECTED = {1: (11, 31), 2: (2, 4), 3: (161, 48), 4: (18, 9), 5: (143, 123)}


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    data = tmp_path / "data" / "2024"
    data.mkdir(parents=True)
    contents = {
        1: "\n".join(DAY01) + "\n",
        2: "\n".join(DAY02) + "\n",
        3: DAY03,
        4: "\n".join(DAY04) + "\n",
        5: "\n".join(DAY05) + "\n",
    }
    for day, text in contents.items():
        (data / f"day{day:02d}.txt").write_text(text, encoding="utf-8")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return data


def test_format_result():
    assert (
        runner.format_result(2024, 1, 11, 31)
        == "Year 2024\n\tDay 1:\n\t\tPart 1: 11\n\t\tPart 2: 31\n"
    )


def test_run_day_unknown_raises():
    with pytest.raises(KeyError):
        runner.run_day(1999, 1)
    with pytest.raises(KeyError):
        runner.run_day(2024, 99)


def test_run_unknown_day_returns_error_status(capsys):
    assert runner.run(2024, 99) == 1
    assert capsys.readouterr().out == ""


def test_run_day_uses_data_file(data_dir):
    assert runner.run_day(2024, 1) == runner.format_result(2024, 1, 11, 31)


def test_run_all_reports_every_day(data_dir):
    expected = "".join(
        runner.format_result(2024, day, *answers) for day, answers in EXPECTED.items()
    )
    assert runner.run_all() == expected


def test_main_single_day_prints(data_dir, capsys):
    assert runner.main(["-y", "2024", "-d", "5"]) == 0
    assert capsys.readouterr().out == runner.format_result(2024, 5, 143, 123) + "\n"


def test_main_without_arguments_runs_all(data_dir, capsys):
    assert runner.main([]) == 0
    out = capsys.readouterr().out
    assert out == runner.run_all() + "\n"


def test_main_unknown_year_fails(capsys):
    assert runner.main(["-y", "1999", "-d", "1"]) == 1
    assert capsys.readouterr().out == ""