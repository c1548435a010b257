"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from gameid.services.result import FORMAT_MISMATCH, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="validate", data={"clean_text": "1234567890"})
        assert result.ok is True
        assert result.op == "validate"
        assert result.data == {"clean_text": "1234567890"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_keeps_data(self) -> None:
        error = ServiceError(code=FORMAT_MISMATCH, message="Format ID Hago salah. Contoh: 1234567")
        result = ServiceResult(ok=False, op="validate", data={"valid": False}, error=error)
        assert result.error is not None
        assert result.error.code == "FORMAT_MISMATCH"
        assert result.data["valid"] is False

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="games", data={"count": 2}, meta={"registry_size": 27})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 2
        assert parsed["meta"]["registry_size"] == 27

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="check")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_detail_defaults_empty(self) -> None:
        assert ServiceError(code="X", message="y").detail == {}

    def test_with_detail(self) -> None:
        error = ServiceError(code="X", message="y", detail={"game": "hago"})
        assert error.detail["game"] == "hago"
