"""BaseService — shared foundation for gameid services.

Every service reads from one :class:`SchemaRegistry`. The registry is
immutable, so a single instance is shared by all services and callers.
"""

from __future__ import annotations

from gameid.domain.registry import DEFAULT_REGISTRY, SchemaRegistry


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def validate(self, raw_text: str, game_code: str) -> ServiceResult:
                descriptor = self._registry.lookup(game_code)
                ...
    """

    def __init__(self, registry: SchemaRegistry | None = None) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry
