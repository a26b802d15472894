from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dmx_struct import __version__
from dmx_struct.ui.cli import cli


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.delenv("DMX_STRUCT_OUTPUT__STYLE", raising=False)
    monkeypatch.delenv("DMX_STRUCT_LOG_LEVEL", raising=False)
    return CliRunner()


def test_parse_prints_canonical_dotted_form(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["parse", "1.511", "1024", "9"], obj={})

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "1.511" in lines
    assert "2.512" in lines
    assert "1.009" in lines


def test_parse_absolute_style(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["parse", "--style", "absolute", "4.465"], obj={})

    assert result.exit_code == 0
    assert "2001" in result.output.splitlines()


def test_parse_json_style(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["parse", "--style", "json", "513"], obj={})

    assert result.exit_code == 0
    line = next(line for line in result.output.splitlines() if line.startswith("{"))
    assert json.loads(line) == {"universe": 2, "channel": 1, "absolute": 513}


def test_parse_uses_configured_style(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "dmx.yaml"
    config.write_text("output:\n  style: absolute\n", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config), "parse", "2.1"], obj={})

    assert result.exit_code == 0
    assert "513" in result.output.splitlines()


def test_parse_reports_invalid_tokens_and_continues(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["parse", "2.513", "1.1"], obj={})

    assert result.exit_code == 1
    assert "invalid DMX address" in result.output
    assert "1.001" in result.output.splitlines()


def test_parse_accepts_negative_looking_token_after_separator(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["parse", "--", "-3"], obj={})

    assert result.exit_code == 1
    assert "invalid DMX address" in result.output


def test_format_command(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["format", "3", "9"], obj={})

    assert result.exit_code == 0
    assert "3.009" in result.output.splitlines()


def test_format_command_rejects_out_of_range(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["format", "2", "513"], obj={})

    assert result.exit_code == 1
    assert "invalid DMX address" in result.output


def test_bad_config_file_fails_cleanly(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "dmx.yaml"
    config.write_text("- not a mapping\n", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config), "parse", "1.1"], obj={})

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_debug_flag_is_accepted(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--debug", "parse", "1.1"], obj={})

    assert result.exit_code == 0
    assert "1.001" in result.output.splitlines()


def test_version_option(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
