"""Tests for CatalogService."""

from gameid.services.catalog import CatalogService


class TestResolve:
    def test_known_game(self) -> None:
        result = CatalogService().resolve("Mobile Legends Diamonds")
        assert result.ok is True
        assert result.op == "resolve"
        assert result.data["code"] == "mobile-legends"
        assert result.data["validation_code"] == "mobile-legends"
        assert result.data["has_format"] is True
        assert result.warnings == []

    def test_heuristic_match_warns(self) -> None:
        result = CatalogService().resolve("Stumble Guys Gems")
        assert result.ok is True
        assert result.data["code"] == "stumble-guys-gems"
        assert result.data["has_format"] is False
        assert result.warnings == ["No catalog rule matched; derived code stumble-guys-gems"]

    def test_blank_name_fails(self) -> None:
        result = CatalogService().resolve("   ")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNRESOLVED_NAME"

    def test_voucher_allowed_by_default(self) -> None:
        result = CatalogService().resolve("Steam Wallet IDR 12000")
        assert result.ok is True
        assert result.data["is_game"] is False

    def test_games_only_rejects_voucher(self) -> None:
        result = CatalogService(games_only=True).resolve("Steam Wallet IDR 12000")
        assert result.ok is False
        assert result.error is not None
        assert result.error.message == "Not a game product: Steam Wallet Code"
        assert result.data["code"] == "steam-wallet"


class TestValidationCode:
    def test_catalog_alias(self) -> None:
        result = CatalogService().validation_code("pubg-mobile")
        assert result.ok is True
        assert result.data == {"game": "pubg-mobile", "validation_code": "pubgm"}

    def test_no_format(self) -> None:
        result = CatalogService().validation_code("steam-wallet")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NO_GAME"


class TestOriginalName:
    def test_raw_name_kept(self) -> None:
        result = CatalogService().resolve("Genshin Impact 60 Crystal ")
        assert result.data["code"] == "genshin-impact"
        assert result.data["original_name"] == "Genshin Impact 60 Crystal "

    def test_heuristic_keeps_raw_name(self) -> None:
        result = CatalogService().resolve("Stumble Guys ")
        assert result.data["original_name"] == "Stumble Guys "
        assert result.data["code"] == "stumble-guys-"
