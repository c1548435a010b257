"""Output mode dispatch for ServiceResult.

``--json`` emits the serialized result, ``-q`` a minimal line per item,
and the default mode a Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gameid.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from gameid.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering options derived from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
