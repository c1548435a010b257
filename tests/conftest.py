"""Shared pytest fixtures for gameid tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from gameid.domain.registry import FormatDescriptor, SchemaRegistry, numeric


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so no stray ``gameid.toml`` is discovered.
    """
    for var in ("GAMEID_CONFIG", "GAMEID_VALIDATION__DEFAULT_GAME", "GAMEID_CATALOG__GAMES_ONLY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def numeric_registry() -> SchemaRegistry:
    """Registry with a single 5-12 digit numeric format."""
    return SchemaRegistry(
        [FormatDescriptor("numeric-test", "Numeric Test", numeric(5, 12), "123456")],
        strict=True,
    )
