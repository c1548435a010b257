"""Tests for ValidationService."""

import functools
import logging

import pytest

from gameid.domain.normalizers import strip_brackets
from gameid.domain.registry import DEFAULT_REGISTRY, FormatDescriptor, SchemaRegistry, numeric
from gameid.services.validation import ValidationService, describe


class TestValidate:
    def test_valid_identifier(self) -> None:
        result = ValidationService().validate("12345678 (1234)", "mobile-legends")
        assert result.ok is True
        assert result.op == "validate"
        assert result.data == {
            "game": "mobile-legends",
            "format": "mobile-legends",
            "valid": True,
            "clean_text": "12345678 1234",
            "player_id": "12345678",
            "zone_id": "1234",
        }
        assert result.warnings == []

    def test_mismatch_is_failed_result(self) -> None:
        result = ValidationService().validate("abc", "free-fire")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "FORMAT_MISMATCH"
        assert result.error.message == "Format ID Free Fire salah. Contoh: 1234567890"
        assert result.data["valid"] is False
        assert result.data["clean_text"] == "abc"

    def test_unknown_game_accepted_with_warning(self) -> None:
        result = ValidationService().validate("  anything goes ", "stumble-guys")
        assert result.ok is True
        assert result.data["clean_text"] == "anything goes"
        assert result.data["format"] is None
        assert result.warnings == ["No format registered for game: stumble-guys"]

    def test_catalog_code_uses_registry_format(self) -> None:
        result = ValidationService().validate("abc", "pubg-mobile")
        assert result.ok is False
        assert result.data["format"] == "pubgm"
        assert result.error is not None
        assert result.error.message == "Format ID PUBG Mobile salah. Contoh: 5123456789"

    def test_server_alias_resolved(self) -> None:
        result = ValidationService().validate("812345678 hk", "genshin-impact")
        assert result.data["clean_text"] == "812345678 os_cht"
        assert result.data["zone_id"] == "os_cht"

    def test_custom_registry(self, numeric_registry: SchemaRegistry) -> None:
        svc = ValidationService(numeric_registry)
        assert svc.validate("1234", "numeric-test").ok is False
        assert svc.validate("12345", "numeric-test").ok is True
        assert svc.registry is numeric_registry

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="gameid"):
            ValidationService().validate("abc", "hago")
        assert any("Rejected identifier for hago" in r.getMessage() for r in caplog.records)


class TestListGames:
    def test_lists_everything(self) -> None:
        result = ValidationService().list_games()
        assert result.ok is True
        assert result.data["count"] == len(DEFAULT_REGISTRY)
        assert result.meta == {"registry_size": len(DEFAULT_REGISTRY)}
        codes = [item["code"] for item in result.data["items"]]
        assert codes == DEFAULT_REGISTRY.codes()

    def test_category_filter(self) -> None:
        result = ValidationService().list_games(category="MOBA")
        assert result.data["count"] == 4
        assert {item["category"] for item in result.data["items"]} == {"MOBA"}

    def test_unknown_category_is_empty(self) -> None:
        result = ValidationService().list_games(category="racing")
        assert result.ok is True
        assert result.data["items"] == []

    def test_describe(self) -> None:
        descriptor = DEFAULT_REGISTRY.lookup("genshin-impact")
        assert descriptor is not None
        assert describe(descriptor) == {
            "code": "genshin-impact",
            "name": "Genshin Impact",
            "category": "RPG",
            "grammar": r"\d{9}\s*[a-zA-Z0-9_]*",
            "example": "812345678 (os_asia)",
            "normalizer": "resolve_server_alias",
        }

    def test_partial_normalizer_listed(self) -> None:
        registry = SchemaRegistry(
            [
                FormatDescriptor(
                    "partial-test",
                    "Partial Test",
                    numeric(5, 8),
                    "12345",
                    normalizer=functools.partial(strip_brackets),
                )
            ],
            strict=True,
        )
        result = ValidationService(registry).list_games()
        assert result.ok is True
        assert result.data["items"][0]["normalizer"] == "partial"


class TestCheck:
    def test_default_registry_consistent(self) -> None:
        result = ValidationService().check()
        assert result.ok is True
        assert result.data["checked"] == len(DEFAULT_REGISTRY)
        assert result.data["problems"] == []

    def test_inconsistent_registry(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = SchemaRegistry([FormatDescriptor("bad", "Bad", numeric(5, 6), "1")])
        with caplog.at_level(logging.WARNING, logger="gameid"):
            result = ValidationService(registry).check()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "REGISTRY_INCONSISTENT"
        assert result.data["count"] == 1
        assert any("Inconsistent format entry" in r.getMessage() for r in caplog.records)
