"""Allow ``python -m gameid``."""

from gameid.cli import cli

cli()
