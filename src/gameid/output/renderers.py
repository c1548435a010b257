"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gameid.output.console import create_console, get_output, style_for_category

if TYPE_CHECKING:
    from rich.console import Console

    from gameid.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Successful validations print only the clean identifier so the output
    can be piped straight into an order request.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "validate":
        return str(result.data.get("clean_text", ""))
    if result.op == "resolve":
        return str(result.data.get("code", ""))

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("code", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="gid.ok"), Text(f"  {result.op}", style="gid.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="gid.key")
    if key in ("code", "format", "validation_code"):
        v = Text(str(value), style="gid.code")
    elif key == "category":
        v = Text(str(value), style=style_for_category(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v)


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="gid.warning"), Text(warning))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="gid.error")
    op = Text(f"  {result.op}", style="gid.op")
    console.print(label, op, Text("—"), Text(msg))

    if result.op == "validate" and "clean_text" in result.data:
        _field(console, "clean_text", result.data["clean_text"])
    elif result.op == "check":
        for problem in result.data.get("problems", []):
            console.print(Text(f"  - {problem}"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    keys = ["game", "clean_text", "player_id", "zone_id"]
    if verbose:
        keys.insert(1, "format")
    for key in keys:
        value = data.get(key)
        if value is not None:
            _field(console, key, value)
    _render_warnings(console, result)


def _render_games(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print("No games registered.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="gid.code", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Example", style="gid.example")
    if verbose:
        table.add_column("Grammar", style="gid.grammar")
        table.add_column("Normalizer", style="dim")

    for item in items:
        category = str(item.get("category", ""))
        row: list[Text] = [
            Text(str(item.get("code", ""))),
            Text(str(item.get("name", ""))),
            Text(category, style=style_for_category(category)),
            Text(str(item.get("example", ""))),
        ]
        if verbose:
            row.append(Text(str(item.get("grammar", ""))))
            row.append(Text(str(item.get("normalizer") or "trim")))
        table.add_row(*row)

    console.print(table)
    console.print(f"{result.data.get('count', len(items))} games")


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    checked = result.data.get("checked", 0)
    console.print(f"[gid.ok]OK[/gid.ok]  {checked} formats consistent with their examples.")


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    for key in ("code", "name", "brand", "category", "validation_code"):
        value = data.get(key)
        if value is not None:
            _field(console, key, value)
    _field(console, "is_game", data.get("is_game"))
    if verbose:
        _field(console, "priority", data.get("priority"))
        _field(console, "original_name", data.get("original_name"))
    _render_warnings(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(Text(f"    {k}: {v}"))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "games": _render_games,
    "check": _render_check,
    "resolve": _render_resolve,
}
