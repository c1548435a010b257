"""Rich Console factory and theme for gameid output.

Consoles render into a StringIO buffer so every renderer returns a plain
``str``. Outside a terminal (tests, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GAMEID_THEME = Theme(
    {
        "gid.ok": "bold green",
        "gid.error": "bold red",
        "gid.warning": "bold yellow",
        "gid.op": "bold cyan",
        "gid.key": "dim",
        "gid.code": "bold blue",
        "gid.example": "italic",
        "gid.grammar": "magenta",
        "gid.category.moba": "green",
        "gid.category.rpg": "blue",
        "gid.category.shooter": "red",
        "gid.category.casual": "yellow",
        "gid.category.voucher": "cyan",
    }
)

_CATEGORY_STYLES: dict[str, str] = {
    "moba": "gid.category.moba",
    "rpg": "gid.category.rpg",
    "battle royale": "gid.category.shooter",
    "fps": "gid.category.shooter",
    "casual": "gid.category.casual",
    "social": "gid.category.casual",
    "voucher": "gid.category.voucher",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console backed by a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Render width; defaults to 100 columns.
    """
    return Console(
        file=StringIO(),
        theme=GAMEID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    """Return the Rich style name for a game category."""
    return _CATEGORY_STYLES.get(category.lower(), "")
