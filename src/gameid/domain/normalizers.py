"""Identifier normalizers applied before grammar matching.

Pure functions over ``str``. Every normalizer is total (the empty string
included), never raises, and is idempotent on its own output.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType

from gameid.domain.types import ServerCode

Normalizer = Callable[[str], str]

_BRACKETS = re.compile(r"[()]")

# Whitespace and line terminators as trimmed by browsers and Node. Unlike
# str.isspace() this includes U+FEFF and excludes \x1c-\x1f and \x85.
WHITESPACE = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_RUN = re.compile(f"[{WHITESPACE}]+")

# Lowercase regional name -> canonical server code.
SERVER_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "asia": ServerCode.OS_ASIA.value,
        "america": ServerCode.OS_USA.value,
        "usa": ServerCode.OS_USA.value,
        "euro": ServerCode.OS_EURO.value,
        "europe": ServerCode.OS_EURO.value,
        "cht": ServerCode.OS_CHT.value,
        "tw": ServerCode.OS_CHT.value,
        "hk": ServerCode.OS_CHT.value,
    }
)


def trim(text: str) -> str:
    """Default transform: strip leading and trailing :data:`WHITESPACE`.

    Examples:
        >>> trim("\\ufeff1234567890 ")
        '1234567890'
    """
    return text.strip(WHITESPACE)


def strip_brackets(text: str) -> str:
    """Drop parentheses and collapse whitespace runs to single spaces.

    Examples:
        >>> strip_brackets("12345678(1234)")
        '12345678 1234'
        >>> strip_brackets("  12345678   ( 1234 ) ")
        '12345678 1234'
    """
    return trim(_WHITESPACE_RUN.sub(" ", _BRACKETS.sub(" ", text)))


def resolve_server(token: str) -> str:
    """Map a regional alias to its canonical code.

    Lookup is case-insensitive. Tokens that are not a known alias come back
    unchanged, including codes that are already canonical.
    """
    return SERVER_ALIASES.get(token.lower(), token)


def resolve_server_alias(text: str) -> str:
    """Canonicalize ``"<uid> <server>"`` input.

    Brackets are stripped first, so ``"812345678 (asia)"`` is accepted.
    Only the first two tokens are kept. A missing server yields the bare
    uid with no trailing space.

    Examples:
        >>> resolve_server_alias("812345678 Asia")
        '812345678 os_asia'
        >>> resolve_server_alias("812345678 xx")
        '812345678 xx'
        >>> resolve_server_alias("812345678")
        '812345678'
    """
    tokens = strip_brackets(text).split(" ")
    primary_id = tokens[0]
    raw_server = tokens[1] if len(tokens) > 1 else ""
    return trim(f"{primary_id} {resolve_server(raw_server)}")
