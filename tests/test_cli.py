"""CLI command tests."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from ui.cli.cli import app
from ui.cli.commands import read_records

runner = CliRunner()


def _thought(number: int, **overrides: object) -> dict:
    record = {
        "thought": f"Step {number}",
        "thoughtType": "model",
        "thoughtNumber": number,
        "totalThoughts": 2,
        "uncertainty": 0.3,
        "dependencies": [],
        "assumptions": [],
        "nextThoughtNeeded": number < 2,
    }
    record.update(overrides)
    return record


def test_read_records_accepts_array_and_json_lines(tmp_path: Path) -> None:
    array_file = tmp_path / "a.json"
    array_file.write_text(json.dumps([_thought(1), _thought(2)]), encoding="utf-8")
    lines_file = tmp_path / "b.jsonl"
    lines_file.write_text(
        json.dumps(_thought(1)) + "\n\n" + json.dumps(_thought(2)) + "\n", encoding="utf-8"
    )

    assert len(read_records(array_file)) == 2
    assert [r["thoughtNumber"] for r in read_records(lines_file)] == [1, 2]


def test_submit_all_valid_exits_zero(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text(json.dumps([_thought(1), _thought(2, dependencies=[1])]), encoding="utf-8")

    result = runner.invoke(app, ["submit", str(path), "--quiet"])

    assert result.exit_code == 0
    assert '"thoughtHistoryLength": 2' in result.stdout


def test_submit_with_rejection_exits_one(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text(json.dumps([_thought(1), _thought(6, dependencies=[5])]), encoding="utf-8")

    result = runner.invoke(app, ["submit", str(path), "--quiet"])

    assert result.exit_code == 1
    assert "thought 5 does not exist" in result.stdout


def test_schema_command_prints_declaration() -> None:
    result = runner.invoke(app, ["schema"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["name"] == "shannonthinking"


def test_config_show_with_override(tmp_path: Path) -> None:
    override = tmp_path / "override.yaml"
    override.write_text("render:\n  color: false\n", encoding="utf-8")

    result = runner.invoke(app, ["config", "show", "--config", str(override)])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["render"]["color"] is False


def test_config_show_rejects_bad_override(tmp_path: Path) -> None:
    override = tmp_path / "override.yaml"
    override.write_text("- nope\n", encoding="utf-8")

    result = runner.invoke(app, ["config", "show", "--config", str(override)])

    assert result.exit_code == 2
