"""Identifier validation — the single entry point of the domain layer.

``validate`` never raises for any string/code pair. A format mismatch is
reported through ``ValidationResult.error``; unknown game codes are
accepted unconditionally with trim-only canonicalization.
"""

from __future__ import annotations

from dataclasses import dataclass

from gameid.domain.normalizers import trim
from gameid.domain.registry import DEFAULT_REGISTRY, FormatDescriptor, SchemaRegistry

# User-facing copy consumed verbatim downstream; keep the wording exact.
ERROR_TEMPLATE = "Format ID {name} salah. Contoh: {example}"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one identifier.

    ``error`` is set if and only if ``is_valid`` is False.
    """

    is_valid: bool
    clean_text: str
    error: str | None = None


@dataclass(frozen=True)
class IdentifierParts:
    """A clean identifier split into the fields a provider order expects."""

    player_id: str
    zone_id: str | None = None


def format_error(descriptor: FormatDescriptor) -> str:
    return ERROR_TEMPLATE.format(name=descriptor.display_name, example=descriptor.example)


def validate(
    raw_text: str,
    game_code: str,
    registry: SchemaRegistry = DEFAULT_REGISTRY,
) -> ValidationResult:
    """Normalize *raw_text* for *game_code* and check it against the grammar."""
    descriptor = registry.lookup(game_code)
    if descriptor is None:
        return ValidationResult(is_valid=True, clean_text=trim(raw_text))

    clean_text = descriptor.normalize(raw_text)
    if descriptor.matches(clean_text):
        return ValidationResult(is_valid=True, clean_text=clean_text)
    return ValidationResult(is_valid=False, clean_text=clean_text, error=format_error(descriptor))


def split_identifier(clean_text: str) -> IdentifierParts:
    """Split a clean identifier into player id and optional zone id.

    Examples:
        >>> split_identifier("12345678 1234")
        IdentifierParts(player_id='12345678', zone_id='1234')
        >>> split_identifier("RiotUser#WR1")
        IdentifierParts(player_id='RiotUser#WR1', zone_id=None)
    """
    words = clean_text.split()
    if not words:
        return IdentifierParts(player_id="")
    zone = " ".join(words[1:])
    return IdentifierParts(player_id=words[0], zone_id=zone or None)
