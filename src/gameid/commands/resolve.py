"""Command: resolve provider product names against the catalog rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gameid.commands._base import GameIdCommand

if TYPE_CHECKING:
    from gameid.commands._context import AppContext


@click.command(
    cls=GameIdCommand,
    examples="""\
  gameid resolve Mobile Legends Diamonds
  gameid resolve "Free Fire Max 100 Diamonds"
  gameid resolve --code pubg-mobile
  gameid -q resolve Genshin Impact Genesis Crystal""",
)
@click.option("--code", "game_code", default=None, help="Look up the format code for a game code.")
@click.argument("name", nargs=-1)
@click.pass_obj
def resolve(app: AppContext, game_code: str | None, name: tuple[str, ...]) -> None:
    """Map a provider product NAME to its internal game code.

    With --code, report which registered format validates that game instead.
    """
    if game_code:
        app.emit(app.catalog.validation_code(game_code))
    else:
        app.emit(app.catalog.resolve(" ".join(name)))
