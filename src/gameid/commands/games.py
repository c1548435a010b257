"""Command: list registered identifier formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gameid.commands._base import GameIdCommand

if TYPE_CHECKING:
    from gameid.commands._context import AppContext


@click.command(
    cls=GameIdCommand,
    examples="""\
  gameid games
  gameid games --category rpg
  gameid -v games
  gameid -q games""",
)
@click.option("--category", default=None, help="Only list games in this category.")
@click.pass_obj
def games(app: AppContext, category: str | None) -> None:
    """List games with a registered identifier format."""
    app.emit(app.validation.list_games(category=category))
