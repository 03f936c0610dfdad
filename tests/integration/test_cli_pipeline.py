from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from hrhiring.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_inputs(tmp_path: Path) -> tuple[Path, Path]:
    candidates_path = tmp_path / "candidates.jsonl"
    sponsors_path = tmp_path / "sponsors.yaml"
    candidates = [
        {"name": "Ava Thompson", "email": "ava@acme.com", "annual_salary": 100000, "sponsor": "R&D"},
        {"name": "Ben Ortiz", "email": "ben@acme.com", "annual_salary": 100000, "sponsor": "Support"},
    ]
    candidates_path.write_text(
        "\n".join(json.dumps(item, ensure_ascii=False) for item in candidates),
        encoding="utf-8",
    )
    sponsors_path.write_text(
        "budgets:\n  - owner: R&D\n    amount: 300000\n  - owner: Support\n    amount: 50000\n",
        encoding="utf-8",
    )
    return candidates_path, sponsors_path


def test_cli_runs_pipeline_and_writes_output(tmp_path: Path, runner: CliRunner) -> None:
    candidates_path, sponsors_path = write_inputs(tmp_path)
    output_path = tmp_path / "results.json"
    audit_path = tmp_path / "audit.jsonl"

    result = runner.invoke(
        app,
        [
            "--candidates",
            str(candidates_path),
            "--sponsors",
            str(sponsors_path),
            "--output",
            str(output_path),
            "--audit-log",
            str(audit_path),
        ],
    )

    assert result.exit_code == 0, result.stdout
    assert "1 hired, 1 rejected" in result.stdout
    assert output_path.exists()

    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["metadata"]["sponsors"] == {"R&D": "200000", "Support": "50000"}
    first, second = rendered["results"]
    assert first["status"] == "hired"
    assert first["employee"]["email"] == "ava@acme.com"
    assert second["error"]["message"] == "Not enough budget."
    assert len(audit_path.read_text(encoding="utf-8").splitlines()) == 2


def test_cli_rejects_invalid_config(tmp_path: Path, runner: CliRunner) -> None:
    candidates_path, sponsors_path = write_inputs(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("departments:\n  it: 5\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "--candidates",
            str(candidates_path),
            "--sponsors",
            str(sponsors_path),
            "--output",
            str(tmp_path / "results.json"),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code != 0


def test_cli_rejects_broken_sponsor_book(tmp_path: Path, runner: CliRunner) -> None:
    candidates_path, sponsors_path = write_inputs(tmp_path)
    sponsors_path.write_text(
        "budgets:\n  - owner: R&D\n    amount: 1\nshared:\n  - owner: Joint\n    members: [Sales]\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        [
            "--candidates",
            str(candidates_path),
            "--sponsors",
            str(sponsors_path),
            "--output",
            str(tmp_path / "results.json"),
        ],
    )

    assert result.exit_code != 0
    assert not (tmp_path / "results.json").exists()


def test_cli_console_logging(tmp_path: Path, runner: CliRunner) -> None:
    candidates_path, sponsors_path = write_inputs(tmp_path)

    result = runner.invoke(
        app,
        [
            "--candidates",
            str(candidates_path),
            "--sponsors",
            str(sponsors_path),
            "--output",
            str(tmp_path / "results.json"),
            "--log-console",
            "--log-level",
            "WARNING",
        ],
    )

    assert result.exit_code == 0, result.stdout
    assert "hire.insufficient_budget" in result.stdout
    assert "hire.completed" not in result.stdout


def test_cli_undecodable_candidate_line_is_reported_not_blamed_on_sponsors(
    tmp_path: Path, runner: CliRunner
) -> None:
    candidates_path, sponsors_path = write_inputs(tmp_path)
    candidates_path.write_bytes(candidates_path.read_bytes() + b'\n{"name": "\xff"}\n')
    output_path = tmp_path / "results.json"

    result = runner.invoke(
        app,
        [
            "--candidates",
            str(candidates_path),
            "--sponsors",
            str(sponsors_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "--sponsors" not in result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert len(rendered["results"]) == 2
    assert rendered["metadata"]["errors"][0].startswith("line 3: invalid UTF-8")


def test_cli_rejects_config_that_is_not_yaml(tmp_path: Path, runner: CliRunner) -> None:
    candidates_path, sponsors_path = write_inputs(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("departments: [unclosed\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "--candidates",
            str(candidates_path),
            "--sponsors",
            str(sponsors_path),
            "--output",
            str(tmp_path / "results.json"),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 2
    assert "Invalid config file" in result.output
    assert not isinstance(result.exception, yaml.YAMLError)
