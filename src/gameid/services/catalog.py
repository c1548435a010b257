"""CatalogService — resolve provider product names to internal games."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from gameid.domain.catalog import resolve_game_name, validation_code_for
from gameid.domain.normalizers import trim
from gameid.services.base import BaseService
from gameid.services.result import NO_GAME, UNRESOLVED_NAME, ServiceError, ServiceResult

if TYPE_CHECKING:
    from gameid.domain.registry import SchemaRegistry

logger = logging.getLogger(__name__)


class CatalogService(BaseService):
    """Catalog lookups backed by the code-baked rule table.

    Args:
        registry: Format registry used for validation-code fallback.
        games_only: Treat names that resolve to non-game products as failures.
    """

    def __init__(
        self,
        registry: SchemaRegistry | None = None,
        *,
        games_only: bool = False,
    ) -> None:
        super().__init__(registry)
        self._games_only = games_only

    def resolve(self, raw_name: str) -> ServiceResult:
        """Resolve *raw_name* and report whose identifier format applies.

        The name is matched as given and echoed back as ``original_name``.
        A blank name is a failure rather than a heuristic entry.
        """
        info = resolve_game_name(raw_name) if trim(raw_name) else None
        if info is None:
            return ServiceResult(
                ok=False,
                op="resolve",
                error=ServiceError(code=UNRESOLVED_NAME, message="Product name is empty"),
            )

        data = asdict(info)
        data["has_format"] = bool(info.validation_code and info.validation_code in self._registry)
        warnings: list[str] = []
        if info.priority == 0:
            logger.debug("No catalog rule for %r; using heuristic %s", raw_name, info.code)
            warnings.append(f"No catalog rule matched; derived code {info.code}")

        if self._games_only and not info.is_game:
            return ServiceResult(
                ok=False,
                op="resolve",
                data=data,
                error=ServiceError(
                    code=UNRESOLVED_NAME,
                    message=f"Not a game product: {info.name}",
                    detail={"category": info.category},
                ),
            )
        return ServiceResult(ok=True, op="resolve", data=data, warnings=warnings)

    def validation_code(self, game_code: str) -> ServiceResult:
        """Return the registry code whose format applies to *game_code*."""
        code = validation_code_for(game_code, self._registry)
        if code is None:
            return ServiceResult(
                ok=False,
                op="validation_code",
                error=ServiceError(
                    code=NO_GAME,
                    message=f"No identifier format known for game: {game_code}",
                ),
            )
        return ServiceResult(
            ok=True,
            op="validation_code",
            data={"game": game_code, "validation_code": code},
        )
