"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO; the caller
extracts the text via ``get_output(console)``. Renderers are dispatched
by ``result.op`` in :func:`render_result`; unknown ops fall through to
a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from graphfold.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphfold.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Ordered results print one id (or ``source -> target``) per line,
    ``reduce`` prints the bare value, graph documents print as JSON.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    d = result.data
    if result.op == "reduce":
        return str(d.get("value"))
    if "graph" in d:
        return _json.dumps(d["graph"], indent=2, default=str)
    if result.op == "export_graph" and "content" in d:
        return str(d["content"]).rstrip("\n")

    items = d.get("items")
    if items and isinstance(items, list):
        return "\n".join(_item_label(item) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_label(item: dict[str, Any]) -> str:
    if item.get("kind") == "edge":
        return f"{item['source']} -> {item['target']}"
    return str(item.get("id", ""))


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="gf.ok"), Text(f"  {result.op}", style="gf.op"), end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="gf.key")
    if key in ("start", "node_id"):
        v = Text(str(value), style="gf.id")
    elif key == "value":
        v = Text(str(value), style="gf.value")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":"), default=str))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="gf.error"),
        Text(f"  {result.op}{code}: ", style="gf.op"),
        Text(msg),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Traversal renderers ──────────────────────────────────────────────


def _render_topo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a topological order as a numbered table."""
    _status_line(console, result)
    items = result.data.get("items", [])
    _field(console, "count", len(items))
    if not items:
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Node", style="gf.id", no_wrap=True)
    for i, item in enumerate(items, start=1):
        table.add_row(str(i), str(item["id"]))
    console.print(table)


def _render_walk(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render walk visit events; edge attributes only in verbose mode."""
    _status_line(console, result)
    d = result.data
    if "start" in d:
        _field(console, "start", d["start"])
    _field(console, "count", d.get("count", 0))
    _field(console, "node_count", d.get("node_count", 0))
    items = d.get("items", [])
    if not items:
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Visit", no_wrap=True)
    if verbose:
        table.add_column("Attrs", style="dim")
    for i, item in enumerate(items, start=1):
        if item["kind"] == "edge":
            row = [str(i), "edge", Text(_item_label(item), style="gf.edge")]
        else:
            row = [str(i), "node", Text(str(item["id"]), style="gf.id")]
        if verbose:
            attrs = item.get("attrs")
            row.append(_json.dumps(attrs, default=str) if attrs else "")
        table.add_row(*row)
    console.print(table)


# ── Graph-document renderers ─────────────────────────────────────────


def _render_graph_doc(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render slice/reverse results: counts, then edges when verbose."""
    _status_line(console, result)
    d = result.data
    if "start" in d:
        _field(console, "start", d["start"])
    _field(console, "node_count", d.get("node_count", 0))
    _field(console, "edge_count", d.get("edge_count", 0))
    doc = d.get("graph", {})
    _field(console, "nodes", [_node_ref(n) for n in doc.get("nodes", [])])
    if verbose:
        for edge in doc.get("edges", []):
            console.print(Text(f"    {edge['source']} -> {edge['target']}", style="gf.edge"))


def _node_ref(node: Any) -> Any:
    return node["id"] if isinstance(node, dict) else node


def _render_reduce(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a reduction value plus the reducers that produced it."""
    _status_line(console, result)
    d = result.data
    _field(console, "value", d.get("value"))
    if verbose:
        for key in ("node_op", "edge_op", "weight_attr", "reversed", "start"):
            if key in d:
                _field(console, key, d[key])


def _render_info(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the graph summary."""
    _status_line(console, result)
    for key in ("node_count", "edge_count", "acyclic", "sources", "sinks"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render export results with output path and counts."""
    _status_line(console, result)
    d = result.data
    for key in ("output_file", "format", "node_count", "edge_count"):
        if key in d:
            _field(console, key, d[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "topo": _render_topo,
    "walk": _render_walk,
    "slice": _render_graph_doc,
    "reverse": _render_graph_doc,
    "reduce": _render_reduce,
    "info": _render_info,
    "export_graph": _render_export,
}
