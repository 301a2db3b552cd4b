import pytest

from osalgo.redirection import main, sum_from_file


def test_sum_written_to_output(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("3 4", encoding="utf-8")
    result = sum_from_file(source, target)
    assert result == 7
    assert target.read_text(encoding="utf-8") == f"Sum = {result}\n"


def test_negative_and_extra_tokens(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("-10\n10 99\n", encoding="utf-8")
    assert sum_from_file(source, target) == 0
    assert target.read_text(encoding="utf-8").startswith("Sum = ")


def test_output_is_truncated(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    target.write_text("old content that is long\n" * 5, encoding="utf-8")
    source.write_text("1 2", encoding="utf-8")
    result = sum_from_file(source, target)
    assert target.read_text(encoding="utf-8") == f"Sum = {result}\n"


def test_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        sum_from_file(tmp_path / "none.txt", tmp_path / "out.txt")


def test_too_few_numbers(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("5", encoding="utf-8")
    with pytest.raises(ValueError):
        sum_from_file(source, tmp_path / "out.txt")


def test_not_a_number(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("five six", encoding="utf-8")
    with pytest.raises(ValueError):
        sum_from_file(source, tmp_path / "out.txt")


def test_main_default_paths(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_text("20 22", encoding="utf-8")
    assert main([]) == 0
    assert (tmp_path / "output.txt").read_text(encoding="utf-8") == "Sum = 42\n"


def test_main_reports_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "none.txt"), str(tmp_path / "out.txt")]) == 1
    assert "error" in capsys.readouterr().err