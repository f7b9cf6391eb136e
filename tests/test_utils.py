import pytest

from aocsolutions.utils import iter_lines, read_lines, to_ints


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("first\nsecond\r\n\nlast", encoding="utf-8")
    return path


def test_read_lines_strips_line_endings(sample_file):
    assert read_lines(sample_file) == ["first", "second", "", "last"]


def test_iter_lines_matches_read_lines(sample_file):
    assert list(iter_lines(sample_file)) == read_lines(sample_file)


def test_iter_lines_is_lazy(sample_file):
    lines = iter_lines(sample_file)
    assert next(lines) == "first"
    assert next(lines) == "second"


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert read_lines(path) == []


def test_missing_file_raises_immediately(tmp_path):
    with pytest.raises(FileNotFoundError):
        iter_lines(tmp_path / "absent.txt")


def test_to_ints_round_trip():
    numbers = [7, -3, 0, 1234]
    assert to_ints(str(n) for n in numbers) == numbers


def test_to_ints_accepts_plus_sign():
    assert to_ints(["+5"]) == [5]


@pytest.mark.parametrize("bad", ["", "abc", "1.5", " 4", "1_000"])
def test_to_ints_rejects_invalid(bad):
    with pytest.raises(ValueError):
        to_ints(["1", bad])