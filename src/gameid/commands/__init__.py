"""Subcommand modules for gameid.

register_commands() imports lazily so ``gameid --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from gameid.commands.check import check
    from gameid.commands.games import games
    from gameid.commands.resolve import resolve
    from gameid.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(games)
    cli.add_command(check)
    cli.add_command(resolve)
