"""ValidationService — identifier validation, registry listing, self-check."""

from __future__ import annotations

import logging
from typing import Any

from gameid.domain.catalog import validation_code_for
from gameid.domain.registry import FormatDescriptor, check_consistency
from gameid.domain.validator import split_identifier, validate
from gameid.services.base import BaseService
from gameid.services.result import (
    FORMAT_MISMATCH,
    REGISTRY_INCONSISTENT,
    ServiceError,
    ServiceResult,
)

logger = logging.getLogger(__name__)


def _callable_name(func: Any) -> str:
    """Name of a normalizer; partials and callable objects report their type."""
    return getattr(func, "__name__", type(func).__name__)


def describe(descriptor: FormatDescriptor) -> dict[str, Any]:
    """Serializable view of a descriptor."""
    return {
        "code": descriptor.code,
        "name": descriptor.display_name,
        "category": descriptor.category,
        "grammar": descriptor.grammar.pattern,
        "example": descriptor.example,
        "normalizer": _callable_name(descriptor.normalizer) if descriptor.normalizer else None,
    }


class ValidationService(BaseService):
    """Validate identifiers against the format registry."""

    def validate(self, raw_text: str, game_code: str) -> ServiceResult:
        """Validate *raw_text* for *game_code*.

        Catalog codes such as ``pubg-mobile`` validate with the format of
        their registry entry. A format mismatch is a failed result carrying
        the user-facing error message verbatim. Unknown game codes succeed
        with a warning.
        """
        format_code = validation_code_for(game_code, self._registry) or game_code
        outcome = validate(raw_text, format_code, self._registry)
        parts = split_identifier(outcome.clean_text)
        known = format_code in self._registry
        data: dict[str, Any] = {
            "game": game_code,
            "format": format_code if known else None,
            "valid": outcome.is_valid,
            "clean_text": outcome.clean_text,
            "player_id": parts.player_id,
            "zone_id": parts.zone_id,
        }

        if not outcome.is_valid:
            assert outcome.error is not None
            logger.info("Rejected identifier for %s: %r", game_code, outcome.clean_text)
            return ServiceResult(
                ok=False,
                op="validate",
                data=data,
                error=ServiceError(
                    code=FORMAT_MISMATCH,
                    message=outcome.error,
                    detail={"game": game_code, "clean_text": outcome.clean_text},
                ),
            )

        warnings: list[str] = []
        if not known:
            logger.debug("No format registered for %s; accepting input", game_code)
            warnings.append(f"No format registered for game: {game_code}")
        return ServiceResult(ok=True, op="validate", data=data, warnings=warnings)

    def list_games(self, *, category: str | None = None) -> ServiceResult:
        """List registered formats, optionally restricted to one category."""
        if category:
            descriptors = self._registry.by_category(category)
        else:
            descriptors = list(self._registry)
        items = [describe(d) for d in descriptors]
        return ServiceResult(
            ok=True,
            op="games",
            data={"items": items, "count": len(items)},
            meta={"registry_size": len(self._registry)},
        )

    def check(self) -> ServiceResult:
        """Verify that every registered example passes its own grammar."""
        problems = check_consistency(self._registry)
        data = {"checked": len(self._registry), "problems": problems, "count": len(problems)}
        if problems:
            for problem in problems:
                logger.warning("Inconsistent format entry: %s", problem)
            return ServiceResult(
                ok=False,
                op="check",
                data=data,
                error=ServiceError(
                    code=REGISTRY_INCONSISTENT,
                    message=f"{len(problems)} registry entries fail their own example",
                    detail={"problems": problems},
                ),
            )
        return ServiceResult(ok=True, op="check", data=data)
