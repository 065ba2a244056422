"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from dynimport.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dynimport.services.result import ServiceResult

# Primary value printed alone in --quiet mode, by op.
_QUIET_KEYS: dict[str, str] = {
    "resolve_target_path": "path",
    "resolve_import": "path",
    "generate_statement": "statement",
}

_FIELD_ORDER = ("statement", "path", "target_path", "relative_path", "formatted_name", "kind")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _render_fields(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value, so the output can be piped."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    key = _QUIET_KEYS.get(result.op)
    if key and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    if key == "statement":
        style = "dyn.statement"
    elif key.endswith("path"):
        style = "dyn.path"
    else:
        style = ""
    console.print(Text.assemble((f"  {key}: ", "dyn.key"), (str(value), style)))


def _render_fields(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="dyn.ok"), Text(f"  {result.op}", style="dyn.op"))
    for key in _FIELD_ORDER:
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text.assemble(f"    {k}: ", str(v)))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    line = Text.assemble(prefix, (f"{duration:>8.3f}ms", "dim"), "  ", str(name))
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dyn.error")
    op = Text(f"  {result.op}", style="dyn.op")
    console.print(label, op, Text(" — "), Text(msg))
    if err:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
