import json
from pathlib import Path

import pytest

from balance_checker.cli import EXIT_OK, EXIT_REJECTED, EXIT_UNREADABLE, main

SAMPLE = "TVWXY\t20/01/2024\t2\t300.00\n1\t100.00\n2\t200.00"


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_cli_approves_valid_file(tmp_path: Path, capsys):
    path = write(tmp_path, "TVWXYB120012024.txt", SAMPLE)

    assert main([str(path)]) == EXIT_OK
    out = capsys.readouterr().out
    assert "File Approved: TVWXYB120012024.txt" in out


def test_cli_json_output_and_failure_exit(tmp_path: Path, capsys):
    good = write(tmp_path, "TVWXYB120012024.txt", SAMPLE)
    bad = write(tmp_path, "TVWXYB220012024.txt", SAMPLE + "\n")

    assert main([str(good), str(bad), "--format", "json"]) == EXIT_REJECTED
    payload = json.loads(capsys.readouterr().out)
    assert [item["passed"] for item in payload] == [True, False]
    assert payload[1]["kind"] == "trailing_blank_line"


def test_cli_reports_missing_file(tmp_path: Path, capsys):
    good = write(tmp_path, "TVWXYB120012024.txt", SAMPLE)

    assert main([str(tmp_path / "missing.txt"), str(good)]) == EXIT_UNREADABLE
    captured = capsys.readouterr()
    assert "Cannot read" in captured.err
    assert "File Approved" in captured.out


def test_cli_rejects_unknown_encoding(tmp_path: Path, capsys):
    path = write(tmp_path, "TVWXYB120012024.txt", SAMPLE)

    with pytest.raises(SystemExit) as excinfo:
        main([str(path), "--encoding", "nope"])

    assert excinfo.value.code == 2
    assert "unknown encoding: nope" in capsys.readouterr().err
