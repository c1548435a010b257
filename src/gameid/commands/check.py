"""Command: registry self-consistency check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gameid.commands._base import GameIdCommand

if TYPE_CHECKING:
    from gameid.commands._context import AppContext


@click.command(
    cls=GameIdCommand,
    examples="""\
  gameid check
  gameid --json check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Verify every registered example passes its own format."""
    app.emit(app.validation.check())
