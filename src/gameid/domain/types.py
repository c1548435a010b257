"""Canonical server codes and catalog categories."""

from __future__ import annotations

from enum import StrEnum


class ServerCode(StrEnum):
    """Provider-expected server codes for region-split games."""

    OS_ASIA = "os_asia"
    OS_USA = "os_usa"
    OS_EURO = "os_euro"
    OS_CHT = "os_cht"


class Category(StrEnum):
    """Grouping labels shared by the format registry and the catalog."""

    MOBA = "MOBA"
    BATTLE_ROYALE = "Battle Royale"
    FPS = "FPS"
    RPG = "RPG"
    CASUAL = "Casual"
    SOCIAL = "Social"
    VOUCHER = "Voucher"
    GAME = "Game"
