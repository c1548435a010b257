"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, gameid.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    default_game: str | None = None


class CatalogConfig(BaseModel):
    """[catalog] section."""

    model_config = {"frozen": True}

    games_only: bool = False


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    level: str = "warning"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)

