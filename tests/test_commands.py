import io
import re

import pytest

from osalgo.commands import copy_file, grep_file, main


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("alpha line\nbeta line\ngamma\nalphabet\n", encoding="utf-8")
    return path


def test_copy_file_copies_content(sample, tmp_path):
    target = tmp_path / "copy.txt"
    result = copy_file(sample, target)
    assert result == target
    assert target.read_bytes() == sample.read_bytes()


def test_copy_file_into_directory(sample, tmp_path):
    folder = tmp_path / "dest"
    folder.mkdir()
    result = copy_file(sample, folder)
    assert result == folder / sample.name
    assert result.read_text(encoding="utf-8") == sample.read_text(encoding="utf-8")


def test_copy_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing.txt", tmp_path / "out.txt")


def test_grep_matches_in_order(sample):
    assert grep_file("alpha", sample) == ["alpha line", "alphabet"]


def test_grep_regex(sample):
    assert grep_file(r"^\w+ line$", sample) == ["alpha line", "beta line"]


def test_grep_no_match(sample):
    assert grep_file("delta", sample) == []


def test_grep_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        grep_file("x", tmp_path / "missing.txt")


def test_grep_bad_pattern(sample):
    with pytest.raises(re.error):
        grep_file("(", sample)


def test_main_cp(sample, tmp_path, capsys):
    target = tmp_path / "out.txt"
    assert main(["cp", str(sample), str(target)]) == 0
    assert target.read_bytes() == sample.read_bytes()
    assert "is copied to" in capsys.readouterr().out


def test_main_grep(sample, capsys):
    assert main(["grep", "beta", str(sample)]) == 0
    assert "beta line" in capsys.readouterr().out.splitlines()


def test_main_grep_missing_file(tmp_path, capsys):
    assert main(["grep", "x", str(tmp_path / "none.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_menu_copy_then_exit(sample, tmp_path, monkeypatch, capsys):
    target = tmp_path / "menu.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO(f"1\n{sample}\n{target}\n3\n"))
    assert main([]) == 0
    assert target.read_bytes() == sample.read_bytes()
    assert "Exiting ..." in capsys.readouterr().out


def test_menu_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n3\n"))
    assert main([]) == 0
    assert "Invalid choice" in capsys.readouterr().out


def test_menu_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Command Simulator" in capsys.readouterr().out