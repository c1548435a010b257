"""Format descriptor registry — game code to identifier grammar.

Descriptors are declarative records. A game with input quirks gets an
optional ``normalizer`` function instead of a dedicated subclass.

INVARIANT: A registry is read-only after construction.
INVARIANT: Every descriptor's ``example``, after its own normalizer,
fully matches its ``grammar``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from gameid.domain.normalizers import Normalizer, resolve_server_alias, strip_brackets, trim
from gameid.domain.types import Category


class RegistryError(ValueError):
    """Raised when a registry is built from duplicate or inconsistent entries."""


@dataclass(frozen=True)
class FormatDescriptor:
    """Accepted identifier format for one game."""

    code: str
    display_name: str
    grammar: re.Pattern[str]
    example: str
    normalizer: Normalizer | None = None
    category: str = Category.GAME.value

    def normalize(self, raw_text: str) -> str:
        """Apply the entry's normalizer, or trim when it has none."""
        if self.normalizer is None:
            return trim(raw_text)
        return self.normalizer(raw_text)

    def matches(self, clean_text: str) -> bool:
        """Whole-string grammar match; substrings never count."""
        return self.grammar.fullmatch(clean_text) is not None


def compile_grammar(expr: str) -> re.Pattern[str]:
    """Compile a grammar expression.

    ``\\d`` and ``\\w`` are ASCII-only, so full-width digits never pass.
    """
    return re.compile(expr, re.ASCII)


def numeric(low: int, high: int) -> re.Pattern[str]:
    """Grammar for a purely numeric id of *low* to *high* digits."""
    return compile_grammar(rf"\d{{{low},{high}}}")


def example_problem(descriptor: FormatDescriptor) -> str | None:
    """Describe why *descriptor*'s example fails its grammar, or return None."""
    cleaned = descriptor.normalize(descriptor.example)
    if descriptor.matches(cleaned):
        return None
    return (
        f"{descriptor.code}: example {descriptor.example!r} normalizes to "
        f"{cleaned!r}, which does not match {descriptor.grammar.pattern!r}"
    )


class SchemaRegistry:
    """Immutable lookup table of :class:`FormatDescriptor` keyed by game code.

    Args:
        descriptors: Entries to load, in display order.
        strict: Reject any entry whose example fails its own grammar.

    Raises:
        RegistryError: On an empty or duplicate code, or, with *strict*,
            an inconsistent example.
    """

    def __init__(self, descriptors: Iterable[FormatDescriptor], *, strict: bool = False) -> None:
        table: dict[str, FormatDescriptor] = {}
        for descriptor in descriptors:
            if not descriptor.code:
                raise RegistryError("Descriptor code must not be empty")
            if descriptor.code in table:
                raise RegistryError(f"Duplicate descriptor code: {descriptor.code}")
            if strict:
                problem = example_problem(descriptor)
                if problem is not None:
                    raise RegistryError(problem)
            table[descriptor.code] = descriptor
        self._descriptors: Mapping[str, FormatDescriptor] = MappingProxyType(table)

    def lookup(self, code: str) -> FormatDescriptor | None:
        """Return the descriptor for *code*. Absence is not an error."""
        return self._descriptors.get(code)

    def codes(self) -> list[str]:
        return list(self._descriptors)

    def by_category(self, category: str) -> list[FormatDescriptor]:
        wanted = category.lower()
        return [d for d in self._descriptors.values() if d.category.lower() == wanted]

    def __contains__(self, code: object) -> bool:
        return code in self._descriptors

    def __iter__(self) -> Iterator[FormatDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)


def check_consistency(registry: SchemaRegistry) -> list[str]:
    """Return one problem string per entry whose example fails its grammar."""
    problems: list[str] = []
    for descriptor in registry:
        problem = example_problem(descriptor)
        if problem is not None:
            problems.append(problem)
    return problems


# ---------------------------------------------------------------------------
# Default catalog
# ---------------------------------------------------------------------------

_MOBA = Category.MOBA.value
_SHOOTER = Category.BATTLE_ROYALE.value
_RPG = Category.RPG.value
_CASUAL = Category.CASUAL.value

_NUMERIC_5_15 = numeric(5, 15)
# Name part: any run of characters without a line terminator.
_RIOT_ID = compile_grammar(r"[^\n\r\u2028\u2029]+#\w{2,6}")


def _casual(code: str, display_name: str, example: str = "12345678") -> FormatDescriptor:
    return FormatDescriptor(code, display_name, _NUMERIC_5_15, example, category=_CASUAL)


DEFAULT_DESCRIPTORS: tuple[FormatDescriptor, ...] = (
    # MOBA
    FormatDescriptor(
        "mobile-legends",
        "Mobile Legends",
        compile_grammar(r"\d{5,12}\s*\(?\d{3,6}\)?"),
        "12345678 (1234)",
        normalizer=strip_brackets,
        category=_MOBA,
    ),
    FormatDescriptor("arena-of-valor", "AOV", numeric(5, 18), "123456781234567", category=_MOBA),
    FormatDescriptor(
        "league-of-legends-wild-rift", "Wild Rift", _RIOT_ID, "RiotUser#WR1", category=_MOBA
    ),
    FormatDescriptor(
        "marvel-super-war", "Marvel Super War", numeric(5, 18), "12345678", category=_MOBA
    ),
    # Battle royale / FPS
    FormatDescriptor("free-fire", "Free Fire", numeric(8, 14), "1234567890", category=_SHOOTER),
    FormatDescriptor(
        "free-fire-max", "Free Fire Max", numeric(8, 14), "1234567890", category=_SHOOTER
    ),
    FormatDescriptor("pubgm", "PUBG Mobile", numeric(5, 14), "5123456789", category=_SHOOTER),
    FormatDescriptor(
        "call-of-duty-mobile", "CODM", numeric(10, 25), "123456789012345678", category=_SHOOTER
    ),
    FormatDescriptor("valorant", "Valorant", _RIOT_ID, "RiotUser#ID1", category=_SHOOTER),
    FormatDescriptor(
        "point-blank",
        "Point Blank",
        compile_grammar(r"[a-zA-Z0-9._-]{3,20}"),
        "PBUsername",
        category=_SHOOTER,
    ),
    FormatDescriptor("bullet-angel", "Bullet Angel", numeric(5, 20), "12345678", category=_SHOOTER),
    # RPG
    FormatDescriptor(
        "genshin-impact",
        "Genshin Impact",
        compile_grammar(r"\d{9}\s*[a-zA-Z0-9_]*"),
        "812345678 (os_asia)",
        normalizer=resolve_server_alias,
        category=_RPG,
    ),
    FormatDescriptor(
        "ragnarok-m-eternal-love-big-cat-coin",
        "Ragnarok M",
        _NUMERIC_5_15,
        "12345678",
        category=_RPG,
    ),
    FormatDescriptor("laplace-m", "Laplace M", _NUMERIC_5_15, "12345678", category=_RPG),
    FormatDescriptor("dragon-raja", "Dragon Raja", _NUMERIC_5_15, "12345678", category=_RPG),
    # Casual / others
    _casual("hago", "Hago", example="1234567"),
    FormatDescriptor(
        "zepeto", "Zepeto", compile_grammar(r"[a-zA-Z0-9._]{3,20}"), "User.123", category=_CASUAL
    ),
    _casual("lords-mobile", "Lords Mobile"),
    _casual("higgs-domino", "Higgs Domino"),
    _casual("speed-drifters", "Speed Drifters"),
    _casual("tom-and-jerry-chase", "Tom & Jerry Chase"),
    _casual("8-ball-pool", "8 Ball Pool"),
    _casual("auto-chess", "Auto Chess"),
    _casual("cocofun", "Cocofun"),
    _casual("indoplay", "IndoPlay"),
    _casual("domino-gaple-qiuqiu-boyaa", "Domino Gaple"),
    FormatDescriptor(
        "honor-of-kings", "Honor of Kings", numeric(5, 20), "123456789", category=_CASUAL
    ),
)

DEFAULT_REGISTRY = SchemaRegistry(DEFAULT_DESCRIPTORS, strict=True)
