"""Catalog name resolution — provider product names to internal game codes.

The reseller catalog lists products under free-text brand names
("Mobile Legends Diamonds", "PUBG Mobile (ID)"). Rules map those names to
a stable internal code plus the registry code whose format applies.

Rules are tried in table order. A rule matches when none of its exclude
patterns and at least one include pattern hit the name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from gameid.domain.registry import DEFAULT_REGISTRY, SchemaRegistry
from gameid.domain.types import Category

_VOUCHER_HINT = re.compile(r"voucher|wallet|gift card|code", re.IGNORECASE)
_NON_SLUG = re.compile(r"[^a-z0-9]")


def _ci(*exprs: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(expr, re.IGNORECASE) for expr in exprs)


@dataclass(frozen=True)
class CatalogRule:
    """Mapping from provider naming to an internal game entry."""

    target_code: str
    provider_code: str
    name: str
    brand: str
    category: str
    emoji: str
    validation_code: str | None
    is_game: bool
    priority: int
    patterns: tuple[re.Pattern[str], ...]
    exclude_patterns: tuple[re.Pattern[str], ...] = ()

    def matches(self, raw_name: str) -> bool:
        if any(p.search(raw_name) for p in self.exclude_patterns):
            return False
        return any(p.search(raw_name) for p in self.patterns)


@dataclass(frozen=True)
class GameInfo:
    """Resolved catalog entry for one raw provider name."""

    code: str
    name: str
    brand: str
    category: str
    emoji: str
    validation_code: str | None
    is_game: bool
    priority: int
    original_name: str

    @classmethod
    def from_rule(cls, rule: CatalogRule, original_name: str) -> GameInfo:
        return cls(
            code=rule.target_code,
            name=rule.name,
            brand=rule.brand,
            category=rule.category,
            emoji=rule.emoji,
            validation_code=rule.validation_code,
            is_game=rule.is_game,
            priority=rule.priority,
            original_name=original_name,
        )


CATALOG_RULES: tuple[CatalogRule, ...] = (
    # MOBA
    CatalogRule(
        target_code="mobile-legends",
        provider_code="mobile-legends",
        name="Mobile Legends: Bang Bang",
        brand="Moonton",
        category=Category.MOBA.value,
        emoji="🎮",
        validation_code="mobile-legends",
        is_game=True,
        priority=100,
        patterns=_ci(r"^Mobile Legends", r"^MLBB"),
        exclude_patterns=_ci("Joki", "Jasa", "Membership", "Vilog"),
    ),
    CatalogRule(
        target_code="arena-of-valor",
        provider_code="arena-of-valor",
        name="Arena of Valor",
        brand="Garena",
        category=Category.MOBA.value,
        emoji="⚔️",
        validation_code="arena-of-valor",
        is_game=True,
        priority=90,
        patterns=_ci(r"^Arena of Valor", r"^AOV"),
    ),
    CatalogRule(
        target_code="league-of-legends-wild-rift",
        provider_code="league-of-legends-wild-rift",
        name="League of Legends: Wild Rift",
        brand="Riot Games",
        category=Category.MOBA.value,
        emoji="💎",
        validation_code="league-of-legends-wild-rift",
        is_game=True,
        priority=90,
        patterns=_ci(r"^League of Legends:? Wild Rift", r"^Wild Rift"),
    ),
    # Battle royale / FPS
    CatalogRule(
        target_code="free-fire",
        provider_code="free-fire",
        name="Free Fire",
        brand="Garena",
        category=Category.BATTLE_ROYALE.value,
        emoji="🔥",
        validation_code="free-fire",
        is_game=True,
        priority=100,
        patterns=_ci(r"^Free Fire(?! Max)"),
        exclude_patterns=_ci("Membership"),
    ),
    CatalogRule(
        target_code="free-fire-max",
        provider_code="free-fire-max",
        name="Free Fire Max",
        brand="Garena",
        category=Category.BATTLE_ROYALE.value,
        emoji="💥",
        validation_code="free-fire-max",
        is_game=True,
        priority=95,
        patterns=_ci(r"^Free Fire Max"),
    ),
    CatalogRule(
        target_code="pubg-mobile",
        provider_code="pubgm",
        name="PUBG Mobile",
        brand="Tencent",
        category=Category.BATTLE_ROYALE.value,
        emoji="🔫",
        validation_code="pubgm",
        is_game=True,
        priority=90,
        patterns=_ci(r"^PUBG Mobile", r"^PUBGM"),
        exclude_patterns=_ci("Global"),
    ),
    CatalogRule(
        target_code="valorant",
        provider_code="valorant",
        name="Valorant",
        brand="Riot Games",
        category=Category.FPS.value,
        emoji="🎯",
        validation_code="valorant",
        is_game=True,
        priority=90,
        patterns=_ci(r"^Valorant"),
    ),
    # RPG / others
    CatalogRule(
        target_code="genshin-impact",
        provider_code="genshin-impact",
        name="Genshin Impact",
        brand="HoYoverse",
        category=Category.RPG.value,
        emoji="✨",
        validation_code="genshin-impact",
        is_game=True,
        priority=90,
        patterns=_ci(r"^Genshin Impact"),
    ),
    CatalogRule(
        target_code="hago",
        provider_code="hago",
        name="Hago",
        brand="Hago",
        category=Category.SOCIAL.value,
        emoji="🤝",
        validation_code="hago",
        is_game=True,
        priority=80,
        patterns=_ci(r"^Hago"),
    ),
    # Vouchers and digital goods
    CatalogRule(
        target_code="steam-wallet",
        provider_code="steam-wallet",
        name="Steam Wallet Code",
        brand="Steam",
        category=Category.VOUCHER.value,
        emoji="💳",
        validation_code=None,
        is_game=False,
        priority=50,
        patterns=_ci(r"^Steam Wallet"),
    ),
    CatalogRule(
        target_code="google-play",
        provider_code="google-play",
        name="Google Play Voucher",
        brand="Google",
        category=Category.VOUCHER.value,
        emoji="🛍️",
        validation_code=None,
        is_game=False,
        priority=50,
        patterns=_ci(r"^Google Play"),
    ),
    CatalogRule(
        target_code="psn-card",
        provider_code="voucher-psn",
        name="Voucher PSN",
        brand="Sony",
        category=Category.VOUCHER.value,
        emoji="🎮",
        validation_code=None,
        is_game=False,
        priority=50,
        patterns=_ci(r"^Voucher PSN", r"^PSN Card"),
    ),
)


def slugify(raw_name: str) -> str:
    """Lowercase *raw_name* and replace every non-alphanumeric char with ``-``."""
    return _NON_SLUG.sub("-", raw_name.lower())


def resolve_game_name(
    raw_name: str,
    rules: tuple[CatalogRule, ...] = CATALOG_RULES,
) -> GameInfo | None:
    """Resolve a provider product name to a :class:`GameInfo`.

    Returns None only for an empty name. Names that no rule claims get a
    heuristic entry: slug code, no validation code, priority 0, and a
    voucher classification when the name looks like one.
    """
    if not raw_name:
        return None

    for rule in rules:
        if rule.matches(raw_name):
            return GameInfo.from_rule(rule, raw_name)

    is_voucher = _VOUCHER_HINT.search(raw_name) is not None
    return GameInfo(
        code=slugify(raw_name),
        name=raw_name,
        brand=raw_name,
        category=Category.VOUCHER.value if is_voucher else Category.GAME.value,
        emoji="🎫" if is_voucher else "🎮",
        validation_code=None,
        is_game=not is_voucher,
        priority=0,
        original_name=raw_name,
    )


def find_rule(code: str, rules: tuple[CatalogRule, ...] = CATALOG_RULES) -> CatalogRule | None:
    """Find the rule whose internal or provider code equals *code*."""
    for rule in rules:
        if code in (rule.target_code, rule.provider_code):
            return rule
    return None


def validation_code_for(
    game_code: str,
    registry: SchemaRegistry = DEFAULT_REGISTRY,
    rules: tuple[CatalogRule, ...] = CATALOG_RULES,
) -> str | None:
    """Return the registry code whose format applies to *game_code*.

    A catalog rule wins; otherwise *game_code* is used directly when the
    registry knows it. ``pubg-mobile`` therefore validates as ``pubgm``.
    """
    rule = find_rule(game_code, rules)
    if rule is not None and rule.validation_code:
        return rule.validation_code
    if game_code in registry:
        return game_code
    return None
