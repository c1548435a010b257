"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, service construction, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gameid.config.logging import configure_logging
from gameid.output.formatters import OutputSettings, format_result
from gameid.services.catalog import CatalogService
from gameid.services.validation import ValidationService

if TYPE_CHECKING:
    from gameid.config.settings import GameIdSettings
    from gameid.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GameIdSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            level=settings.logging.level,
        )

    @property
    def validation(self) -> ValidationService:
        return ValidationService()

    @property
    def catalog(self) -> CatalogService:
        return CatalogService(games_only=self.settings.catalog.games_only)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return. In quiet mode warnings go to
          stderr so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if settings.quiet and not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
