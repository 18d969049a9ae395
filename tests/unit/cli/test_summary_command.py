"""Unit tests for summary CLI command.

These tests drive the Typer app through CliRunner against small crawl logs
written to a temporary directory.
"""

from __future__ import annotations

import gzip
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from crawltally.cli.app import app

runner = CliRunner()

LOG_LINES = [
    "2011-06-21T14:03:44Z 200 100 http://a.example.com/x - - text/html #1 - - - -",
    "2011-06-21T14:03:45Z 200 50 http://b.example.com/y - - text/html #1 - - - -",
    "2011-06-21T14:03:46Z 404 0 not-a-url - - - #1 - - - -",
]


@pytest.fixture
def small_log(tmp_path: Path) -> Path:
    path = tmp_path / "crawl.log"
    path.write_text("\n".join(LOG_LINES) + "\n", encoding="utf-8")
    return path


def test_summary_command_json_stdout(small_log: Path) -> None:
    result = runner.invoke(app, ["summary", str(small_log)])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["totals"]["count"] == 3
    assert data["totals"]["total_bytes"] == 150
    assert data["status_codes"]["200"]["count"] == 2
    assert data["mime_types"][""]["count"] == 1


def test_summary_command_group_by_registered_domain(small_log: Path) -> None:
    result = runner.invoke(app, ["summary", str(small_log), "-g", "registered-domain"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert set(data) == {"example.com", ""}
    assert data["example.com"]["totals"]["count"] == 2


def test_summary_command_group_by_host(small_log: Path) -> None:
    result = runner.invoke(app, ["summary", str(small_log), "--group-by", "host"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert set(data) == {"a.example.com", "b.example.com", ""}


def test_summary_command_group_by_from_env(
    small_log: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CRAWLTALLY_GROUP_BY", "host")

    result = runner.invoke(app, ["summary", str(small_log)])

    assert result.exit_code == 0, result.output
    assert "a.example.com" in json.loads(result.stdout)


def test_summary_command_table_format(small_log: Path) -> None:
    result = runner.invoke(app, ["summary", str(small_log), "-f", "table"])

    assert result.exit_code == 0, result.output
    assert "Total: 3 records, 150 bytes" in result.output
    assert "Not Found" in result.output
    assert "text/html" in result.output


def test_summary_command_writes_file(small_log: Path, tmp_path: Path) -> None:
    output_path = tmp_path / "summary.json"

    result = runner.invoke(app, ["summary", str(small_log), "-o", str(output_path)])

    assert result.exit_code == 0, result.output
    assert "Wrote summary" in result.output
    assert json.loads(output_path.read_text())["totals"]["count"] == 3


def test_summary_command_writes_table_file(small_log: Path, tmp_path: Path) -> None:
    output_path = tmp_path / "summary.txt"

    result = runner.invoke(
        app, ["summary", str(small_log), "-f", "table", "-o", str(output_path)]
    )

    assert result.exit_code == 0, result.output
    assert "Total: 3 records, 150 bytes" in output_path.read_text()


def test_summary_command_reads_several_files(small_log: Path, tmp_path: Path) -> None:
    second = tmp_path / "second.log"
    second.write_text(LOG_LINES[0] + "\n", encoding="utf-8")

    result = runner.invoke(app, ["summary", str(small_log), str(second)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["totals"]["count"] == 4


def test_summary_command_missing_file_returns_nonzero(tmp_path: Path) -> None:
    result = runner.invoke(app, ["summary", str(tmp_path / "missing.log")])

    assert result.exit_code == 1
    assert "Failed reading crawl log" in result.stderr
    assert "Failed reading crawl log" not in result.stdout


def test_summary_command_truncated_gzip_returns_nonzero(tmp_path: Path) -> None:
    data = gzip.compress(("\n".join(LOG_LINES * 20) + "\n").encode("utf-8"))
    path = tmp_path / "crawl.log.gz"
    path.write_bytes(data[: len(data) // 2])

    result = runner.invoke(app, ["summary", str(path)])

    assert result.exit_code == 1
    assert "Failed reading crawl log" in result.stderr
    assert "Aborted" not in result.output


def test_summary_command_corrupt_gzip_returns_nonzero(tmp_path: Path) -> None:
    data = bytearray(gzip.compress(("\n".join(LOG_LINES) + "\n").encode("utf-8")))
    data[10] = 0xFF
    path = tmp_path / "crawl.log.gz"
    path.write_bytes(bytes(data))

    result = runner.invoke(app, ["summary", str(path)])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Failed reading crawl log" in result.stderr


def test_summary_command_reports_skipped_lines(tmp_path: Path) -> None:
    path = tmp_path / "crawl.log"
    path.write_text(LOG_LINES[0] + "\ngarbage line\n", encoding="utf-8")
    output_path = tmp_path / "summary.json"

    result = runner.invoke(app, ["summary", str(path), "-o", str(output_path)])

    assert result.exit_code == 0, result.output
    assert "skipped 1 of 2 lines" in result.output
    assert json.loads(output_path.read_text())["totals"]["count"] == 1


def test_summary_command_rejects_unknown_grouping(small_log: Path) -> None:
    result = runner.invoke(app, ["summary", str(small_log), "-g", "path"])
    assert result.exit_code != 0


def test_invalid_log_level_is_rejected(small_log: Path) -> None:
    result = runner.invoke(app, ["--log-level", "LOUD", "summary", str(small_log)])
    assert result.exit_code != 0


def test_summary_command_help() -> None:
    result = runner.invoke(app, ["summary", "--help"])
    assert result.exit_code == 0
    assert "group-by" in result.output
