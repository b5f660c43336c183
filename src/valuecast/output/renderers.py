"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from valuecast.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from valuecast.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "vc.ok"), (f"  {result.op}", "vc.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = style_for_type(str(value)) if key in ("source", "target") else ""
    console.print(Text.assemble((f"  {key}: ", "vc.key"), (str(value), style)))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "vc.error"), (f"  {result.op}", "vc.op"), f" - {msg}"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Matrix renderers ──────────────────────────────────────────────────


def _render_matrix(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the compatibility matrix as a source × target grid."""
    types: list[str] = result.data.get("types", [])
    table = Table(title="Compatibility", show_header=True, pad_edge=False, expand=False)
    table.add_column("Source → Target", style="bold", no_wrap=True)
    for name in types:
        table.add_column(name, justify="center", style=style_for_type(name))

    for row in result.data.get("rows", []):
        allowed = set(row["targets"])
        cells = [
            Text("yes", style="vc.allowed") if name in allowed else Text("no", style="vc.denied")
            for name in types
        ]
        table.add_row(Text(row["source"], style=style_for_type(row["source"])), *cells)

    console.print(table)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("source", "target", "allowed"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_convert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    keys = ("source", "raw", "target", "value") if verbose else ("source", "target", "value")
    for key in keys:
        if key in result.data:
            _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "matrix": _render_matrix,
    "check": _render_check,
    "convert": _render_convert,
}
