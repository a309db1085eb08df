"""Tests for the healthlive CLI."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from healthlive.cli import main

from tests.conftest import write_jsonl


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def history(tmp_path, sample_records):
    return write_jsonl(tmp_path / "history.jsonl", sample_records)


class TestIngest:
    def test_accepts_and_appends(self, runner, tmp_path):
        path = tmp_path / "history.jsonl"
        body = json.dumps({"metrics": {"hrv": 55}, "source": "HAE"})
        result = runner.invoke(
            main,
            ["ingest", "--token", "s3cret", "--history", str(path)],
            input=body,
            env={"HAE_TOKEN": "s3cret"},
        )
        assert result.exit_code == 0, result.output
        assert "Stored export" in result.output

        stored = json.loads(path.read_text(encoding="utf-8"))
        assert stored["metrics"] == {"hrv": 55}
        assert stored["payload"] == {"source": "HAE"}
        assert stored["ingest_date"]

    def test_wrong_token(self, runner, tmp_path):
        path = tmp_path / "history.jsonl"
        result = runner.invoke(
            main,
            ["ingest", "--token", "nope", "--secret", "s3cret", "--history", str(path)],
            input='{"metrics": {"hrv": 55}}',
        )
        assert result.exit_code == 1
        assert "Unauthorized" in result.output
        assert not path.exists()

    def test_empty_body(self, runner, tmp_path):
        result = runner.invoke(
            main,
            ["ingest", "-t", "s3cret", "--secret", "s3cret", "-H", str(tmp_path / "h.jsonl")],
            input="{}",
        )
        assert result.exit_code == 1
        assert "metrics or workouts" in result.output

    def test_invalid_json(self, runner, tmp_path):
        result = runner.invoke(
            main,
            ["ingest", "-t", "s3cret", "--secret", "s3cret", "-H", str(tmp_path / "h.jsonl")],
            input="not json",
        )
        assert result.exit_code == 1
        assert "not valid JSON" in result.output


class TestDerive:
    def test_prints_json(self, runner, history):
        result = runner.invoke(main, ["derive", "-H", str(history), "--range", "all"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data["rows"]) == 8
        assert data["latest_date"] == "2024-02-08"

    def test_default_range_filters_old_records(self, runner, history):
        result = runner.invoke(main, ["derive", "-H", str(history)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["rows"] == []

    def test_huge_range_keeps_full_history(self, runner, history):
        result = runner.invoke(main, ["derive", "-H", str(history), "-r", "3000y"])
        assert result.exit_code == 0, result.output
        assert len(json.loads(result.stdout)["rows"]) == 8

    def test_output_file(self, runner, history, tmp_path):
        out = tmp_path / "summary.json"
        result = runner.invoke(
            main, ["derive", "-H", str(history), "-r", "all", "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text(encoding="utf-8"))["trends"]["dates"][0] == "2024-02-01"


class TestShow:
    def test_cards_and_table(self, runner, history):
        result = runner.invoke(main, ["show", "-H", str(history), "-r", "all"])
        assert result.exit_code == 0, result.output
        assert "Health Dashboard: 2024-02-08" in result.output
        assert "Recovery:" in result.output
        assert "2024-02-01" in result.output

    def test_no_table(self, runner, history):
        result = runner.invoke(main, ["show", "-H", str(history), "-r", "all", "--no-table"])
        assert result.exit_code == 0, result.output
        assert "2024-02-01" not in result.output

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Health Auto Export" in result.output
