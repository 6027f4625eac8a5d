"""Tests for the themegen command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from themegen import __version__
from themegen.cli import app


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


def test_generate_success(cli_runner: CliRunner, project: Path, monkeypatch):
    monkeypatch.chdir(project)
    result = cli_runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Theme generation completed successfully!" in result.output
    assert "Generated files:" in result.output
    assert "Presentation/custom_theme.scss" in result.output.replace("\\", "/")
    assert (project / "R" / "Exercises" / "_exercise_theme.scss").exists()


def test_generate_missing_input(cli_runner: CliRunner, tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = cli_runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Error during theme generation:" in result.output
    assert "Error: colors.json not found. Please create this file first." in result.output


def test_generate_malformed_input(cli_runner: CliRunner, project: Path, monkeypatch):
    (project / "Presentation" / "fonts.json").write_text("[]", encoding="utf-8")
    monkeypatch.chdir(project)
    result = cli_runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Error: Expected a JSON object" in result.output


def test_generate_non_utf8_input(cli_runner: CliRunner, project: Path, monkeypatch):
    (project / "Presentation" / "colors.json").write_bytes(b"\xff")
    monkeypatch.chdir(project)
    result = cli_runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Error during theme generation:" in result.output
    assert "colors.json is not UTF-8 text" in result.output
    assert not (project / "Presentation" / "_colors.scss").exists()


def test_log_level_from_environment(cli_runner: CliRunner, project: Path, monkeypatch):
    monkeypatch.chdir(project)
    monkeypatch.setenv("THEMEGEN_LOG_LEVEL", "debug")
    result = cli_runner.invoke(app, [])
    assert result.exit_code == 0


def test_rejects_arguments(cli_runner: CliRunner, project: Path, monkeypatch):
    monkeypatch.chdir(project)
    result = cli_runner.invoke(app, ["--force"])
    assert result.exit_code != 0


def test_version(cli_runner: CliRunner, tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = cli_runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"themegen {__version__}"
    # Exits before generation, so nothing is needed on disk
    assert list(tmp_path.iterdir()) == []
