import io
import sys

import pytest

from adventkit import y2024_day01
from adventkit.cli import main, read_input

FREQUENCIES = "+1\n-2\n+3\n+1\n"


def test_read_input_explicit_path(tmp_path):
    path = tmp_path / "puzzle.in"
    path.write_text("hello\n")
    assert read_input("day1", path) == "hello\n"


def test_read_input_default_directory(tmp_path, monkeypatch):
    inputs = tmp_path / "inputs"
    inputs.mkdir()
    (inputs / "day7.in").write_text("seven")
    workdir = tmp_path / "a" / "b"
    workdir.mkdir(parents=True)
    monkeypatch.chdir(workdir)
    assert read_input("day7") == "seven"


def test_read_input_falls_back_to_stdin(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("from stdin"))
    assert read_input("day3") == "from stdin"


def test_read_input_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input("day1", tmp_path / "absent.in")


def test_main_part_one(tmp_path, capsys):
    path = tmp_path / "day1.in"
    path.write_text(FREQUENCIES)
    assert main(["2018", "1", "1", "--input", str(path)]) == 0
    assert capsys.readouterr().out == "3\n"


def test_main_part_two(tmp_path, capsys):
    path = tmp_path / "day1.in"
    path.write_text(FREQUENCIES)
    assert main(["2018", "1", "2", "--input", str(path)]) == 0
    assert capsys.readouterr().out == "2\n"


def test_main_matches_module(tmp_path, capsys):
    text = "3 4\n4 3\n2 5\n1 3\n3 9\n3 3\n"
    path = tmp_path / "lists.in"
    path.write_text(text)
    assert main(["2024", "1", "2", "--input", str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(y2024_day01.part_two(text))


def test_main_unknown_puzzle_exits():
    with pytest.raises(SystemExit) as excinfo:
        main(["1999", "1"])
    assert excinfo.value.code == 2


def test_main_unknown_part_exits():
    with pytest.raises(SystemExit) as excinfo:
        main(["2019", "1", "2"])
    assert excinfo.value.code == 2


def test_main_missing_file_fails(tmp_path, capsys):
    assert main(["2018", "1", "1", "--input", str(tmp_path / "absent.in")]) == 1
    assert "adventkit:" in capsys.readouterr().err