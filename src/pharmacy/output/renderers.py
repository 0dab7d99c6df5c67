"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pharmacy.output.console import create_console, get_output, style_for_benefit

if TYPE_CHECKING:
    from rich.console import Console

    from pharmacy.services.result import ServiceResult

_Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

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
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="rx.ok")
    op = Text(f"  {result.op}", style="rx.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rx.key")
    if key in ("category", "name"):
        v = Text(str(value), style=f"rx.{key}")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _bound(value: int | None) -> str:
    return "∞" if value is None else str(value)


def _drug_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table of drug dicts."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="rx.name")
    table.add_column("Expires In", justify="right")
    table.add_column("Benefit", justify="right")
    for item in items:
        expires_in = item.get("expiresIn", 0)
        benefit = item.get("benefit", 0)
        table.add_row(
            str(item.get("name", "")),
            Text(str(expires_in), style="rx.expired" if expires_in < 0 else ""),
            Text(str(benefit), style=style_for_benefit(benefit)),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rx.error")
    op = Text(f"  {result.op}", style="rx.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Simulation ────────────────────────────────────────────────────────


def _render_simulate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "days", d.get("days", 0))
    _field(console, "count", d.get("count", 0))

    if verbose:
        for day, snapshot in enumerate(d.get("history", []), start=1):
            console.print()
            console.print(Text(f"  day {day}", style="rx.key"))
            console.print(_drug_table(snapshot))

    console.print()
    console.print(_drug_table(d.get("items", [])))


# ── Rule catalog ──────────────────────────────────────────────────────


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Category", style="rx.category")
    table.add_column("Valid From", justify="right")
    table.add_column("Valid Until", justify="right")
    table.add_column("Benefit")
    for entry in result.data.get("items", []):
        rules = entry.get("rules", [])
        if not rules:
            table.add_row(entry["category"], "", "", Text("unchanged", style="dim"))
            continue
        for rule in rules:
            table.add_row(
                entry["category"],
                _bound(rule["validFrom"]),
                _bound(rule["validUntil"]),
                str(rule.get("description") or ""),
            )
    console.print(table)


def _render_explain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "category", d["category"])
    rule = d.get("rule")
    if rule is None:
        _field(console, "rule", "none (benefit never changes)")
    else:
        span = f"[{_bound(rule['validUntil'])}, {_bound(rule['validFrom'])}]"
        if rule["validFrom"] is None and rule["validUntil"] is None:
            span = "default"
        _field(console, "rule", f"{span} {rule.get('description') or ''}".rstrip())
    console.print()
    console.print(_drug_table([d["before"], d["after"]]))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "simulate": _render_simulate,
    "rules": _render_rules,
    "explain": _render_explain,
}
