"""Command: validate a game account identifier."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gameid.commands._base import GameIdCommand
from gameid.services.result import NO_GAME, ServiceError, ServiceResult

if TYPE_CHECKING:
    from gameid.commands._context import AppContext


@click.command(
    cls=GameIdCommand,
    examples="""\
  gameid validate -g mobile-legends "12345678 (1234)"
  gameid validate -g genshin-impact 812345678 asia
  gameid validate -g valorant "RiotUser#ID1"
  gameid -q validate -g free-fire 1234567890
  gameid --json validate -g pubg-mobile 5123456789""",
)
@click.option(
    "-g", "--game", default=None, help="Game code (defaults to [validation] default_game)."
)
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, game: str | None, text: tuple[str, ...]) -> None:
    """Validate and normalize an account identifier for a game.

    Words of TEXT are joined with single spaces, so quoting is optional.
    Exits with status 1 when the identifier does not match the game's format.
    """
    game_code = game or app.settings.validation.default_game
    if not game_code:
        app.emit(
            ServiceResult(
                ok=False,
                op="validate",
                error=ServiceError(
                    code=NO_GAME,
                    message="No game given; pass --game or set [validation] default_game",
                ),
            )
        )
        return
    app.emit(app.validation.validate(" ".join(text), game_code))
