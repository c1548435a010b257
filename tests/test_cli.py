"""Tests for the root gameid CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from gameid import __version__
from gameid.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "gameid" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_quiet_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "--version"])
    assert result.exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_log_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--log-json", "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/test.toml", "--version"])
    assert result.exit_code == 0


# --- Commands registered ---

EXPECTED_COMMANDS = ["validate", "games", "check", "resolve"]


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert name in result.output


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_help(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Config file ---


@pytest.mark.usefixtures("_isolated_cwd")
def test_explicit_config_path(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "elsewhere.toml"
    config.write_text('[validation]\ndefault_game = "hago"\n')
    result = cli_runner.invoke(cli, ["--json", "-c", str(config), "validate", "1234567"])
    assert result.exit_code == 0
    assert json.loads(result.output)["data"]["game"] == "hago"


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_toml_is_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "gameid.toml").write_text("[validation\n")
    result = cli_runner.invoke(cli, ["check"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
