import logging
import os

import pytest

import cli
from factories import plain_sheet, subgroup_sheet


def _sheets(path):
    if path.stem == "broken":
        return [plain_sheet("only one")]
    return [plain_sheet("1"), subgroup_sheet("2"), plain_sheet("3"), plain_sheet("4")]


@pytest.fixture
def schedules_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "load_sheets", _sheets)
    raw = tmp_path / "raw"
    raw.mkdir()
    (raw / "itkn.xlsx").write_bytes(b"")
    (raw / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path


def test_convert_writes_parsed_json(schedules_dir):
    assert cli.main(["convert", "--schedules-dir", str(schedules_dir)]) == 0
    assert (schedules_dir / "parsed" / "itkn.json").exists()
    assert not (schedules_dir / "parsed" / "notes.json").exists()


def test_convert_skips_fresh_files(schedules_dir):
    raw_dir = schedules_dir / "raw"
    parsed_dir = schedules_dir / "parsed"
    assert cli.convert_all(schedules_dir) == 0
    assert cli.pending_files(raw_dir, parsed_dir) == []
    assert cli.pending_files(raw_dir, parsed_dir, force=True) == [raw_dir / "itkn.xlsx"]

    parsed = parsed_dir / "itkn.json"
    raw_mtime = (raw_dir / "itkn.xlsx").stat().st_mtime
    os.utime(parsed, (raw_mtime - 60, raw_mtime - 60))
    assert cli.pending_files(raw_dir, parsed_dir) == [raw_dir / "itkn.xlsx"]


def test_convert_continues_after_failure(schedules_dir, caplog):
    (schedules_dir / "raw" / "broken.xls").write_bytes(b"")
    with caplog.at_level(logging.ERROR):
        assert cli.convert_all(schedules_dir) == 1
    assert "broken.xls" in caplog.text
    assert (schedules_dir / "parsed" / "itkn.json").exists()
    assert not (schedules_dir / "parsed" / "broken.json").exists()


def test_convert_without_raw_dir(tmp_path):
    assert cli.main(["convert", "-d", str(tmp_path)]) == 1


def test_show_prints_subgroup(schedules_dir, capsys):
    cli.convert_all(schedules_dir)
    parsed = schedules_dir / "parsed" / "itkn.json"

    assert cli.main(["show", str(parsed), "-c", "1", "-g", "Group", "-s", "2"]) == 0
    out = capsys.readouterr().out
    assert "подгруппа 2" in out
    assert "CS • Лабораторные • Teacher2 • Class2" in out
    assert "Math" not in out


@pytest.mark.parametrize(
    "args",
    [
        ["-c", "1", "-g", "Missing"],
        ["-c", "1", "-g", "Group", "-s", "3"],
        ["-c", "7", "-g", "Group"],
    ],
)
def test_show_reports_unknown_targets(schedules_dir, args):
    cli.convert_all(schedules_dir)
    parsed = schedules_dir / "parsed" / "itkn.json"
    assert cli.main(["show", str(parsed), *args]) == 1


def test_show_reports_broken_file(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("[]", encoding="utf-8")
    assert cli.main(["show", str(broken), "-g", "Group"]) == 1
