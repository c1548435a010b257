"""Root CLI group for gameid with global flags and command registration."""

from __future__ import annotations

import click

from gameid import __version__
from gameid.commands import register_commands
from gameid.commands._base import GameIdGroup
from gameid.commands._context import AppContext
from gameid.config.settings import GameIdSettings


@click.group(
    cls=GameIdGroup,
    invoke_without_command=True,
    examples="""\
  gameid validate -g mobile-legends "12345678 (1234)"
  gameid games --category moba
  gameid resolve Mobile Legends Diamonds""",
)
@click.version_option(version=__version__, prog_name="gameid")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """gameid — game account identifier validation."""
    ctx.ensure_object(dict)
    settings = GameIdSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
