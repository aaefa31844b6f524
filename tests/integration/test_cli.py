"""Integration tests for the command line entrypoint."""

from __future__ import annotations

from pathlib import Path

import pytest

from vocab_import.cli import main


def test_main_writes_tsv_and_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "words.txt"
    source.write_bytes("apple  n. 苹果\napple  n. 苹果\nrun  v. to run n. a sprint\n".encode("utf-8-sig"))
    output = tmp_path / "out.tsv"

    exit_code = main([str(source), "--output", str(output), "--name", "测试"])

    assert exit_code == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert lines[2].split("\t")[4] == "v. to run\\nn. a sprint"
    report = (tmp_path / "report.md").read_text(encoding="utf-8")
    assert "| library | 测试 |" in report
    assert "Skipped duplicates: 1" in capsys.readouterr().out


def test_main_reports_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "words.pdf"
    source.write_bytes(b"whatever")

    exit_code = main([str(source), "--output", str(tmp_path / "out.tsv")])

    assert exit_code == 1
    assert "unsupported_format" in capsys.readouterr().out
    assert not (tmp_path / "out.tsv").exists()
