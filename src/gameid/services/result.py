"""ServiceResult and ServiceError — the contract every service returns.

INVARIANT: Service methods report failures through ServiceResult, never
by raising. The CLI renders this type for humans or as JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes carried in ServiceError.code
FORMAT_MISMATCH = "FORMAT_MISMATCH"
REGISTRY_INCONSISTENT = "REGISTRY_INCONSISTENT"
UNRESOLVED_NAME = "UNRESOLVED_NAME"
NO_GAME = "NO_GAME"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Uniform return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"validate"``, ``"games"``, ``"check"``, ``"resolve"``).
        data: Operation payload. Failed validations still carry their data.
        warnings: Non-fatal notes for the caller.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, registry size).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
