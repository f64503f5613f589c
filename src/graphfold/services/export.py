"""ExportService - render a graph as SVG, Graphviz DOT, or D3 JSON.

SVG uses the layered layout from :mod:`graphfold.domain.layout`: one
row per walk depth, each row's nodes spread evenly across the widest
row. DOT and JSON go through the NetworkX view of the graph.
"""

from __future__ import annotations

import hashlib
import html
import json
import math
from typing import TYPE_CHECKING, Any

from graphfold.domain.layout import layout
from graphfold.domain.models import edge_label
from graphfold.infrastructure.graph.engine import to_networkx
from graphfold.services.base import BaseService
from graphfold.services.result import ServiceResult

if TYPE_CHECKING:
    import networkx as nx

    from graphfold.config.models import RenderConfig
    from graphfold.domain.graph import Graph

EXPORT_FORMATS: tuple[str, ...] = ("svg", "dot", "json")

# Scoped per document so several inline SVGs never share rules.
_SVG_STYLE = """
#{uid} .edgepath {{ stroke: currentColor; fill: none; marker-end: url(#{uid}-arrowhead); }}
#{uid} .edgelabel {{ pointer-events: none; font-size: 10px; fill: currentColor; }}
#{uid} textPath {{ text-anchor: middle; font-family: system-ui,sans-serif; }}
#{uid} .node circle {{ stroke: currentColor; fill: transparent; }}
#{uid} .node text {{ fill: currentColor; text-anchor: middle; font-family: system-ui,sans-serif; dominant-baseline: central; }}
"""


class ExportService(BaseService):
    """Handles graph rendering and serialization."""

    def export_graph(self, *, fmt: str | None = None) -> ServiceResult:
        """Export the graph.

        Formats:
        - ``svg`` - layered vector image
        - ``dot`` - Graphviz DOT language
        - ``json`` - D3-compatible ``{"nodes": [...], "links": [...]}``

        Returns the content as a string in ``data["content"]``.
        """
        fmt = fmt or self._settings.export.default_format
        g = self._graph

        if fmt == "svg":
            content = render_svg(g, self._settings.render)
        elif fmt == "dot":
            content = self._to_dot(to_networkx(g))
        elif fmt == "json":
            content = self._to_d3_json(to_networkx(g))
        else:
            return ServiceResult.failure(
                "export_graph",
                "INVALID_FORMAT",
                f"Unknown graph format: {fmt}",
                format=fmt,
                valid=list(EXPORT_FORMATS),
            )

        return ServiceResult(
            ok=True,
            op="export_graph",
            data={
                "format": fmt,
                "content": content,
                "node_count": len(g.nodes),
                "edge_count": len(g.edges),
            },
        )

    # ── Private helpers ───────────────────────────────────────────────

    @staticmethod
    def _to_dot(g: nx.MultiDiGraph) -> str:
        """Generate Graphviz DOT notation from a NetworkX MultiDiGraph."""
        lines = ["digraph graphfold {", "  rankdir=TB;", "  node [shape=circle];"]

        for node_id, attrs in g.nodes(data=True):
            label = _dot_quote(attrs.get("label", node_id))
            lines.append(f"  {_dot_quote(node_id)} [label={label}];")

        for src, tgt, attrs in g.edges(data=True):
            label = edge_label(attrs)
            suffix = f" [label={_dot_quote(label)}]" if label else ""
            lines.append(f"  {_dot_quote(src)} -> {_dot_quote(tgt)}{suffix};")

        lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _to_d3_json(g: nx.MultiDiGraph) -> str:
        """Generate D3-compatible JSON from a NetworkX MultiDiGraph."""
        d3_nodes = [{"id": node_id, **attrs} for node_id, attrs in g.nodes(data=True)]
        d3_links = [
            {"source": src, "target": tgt, **attrs} for src, tgt, attrs in g.edges(data=True)
        ]
        return json.dumps({"nodes": d3_nodes, "links": d3_links}, indent=2, default=str) + "\n"


def _dot_quote(value: Any) -> str:
    """Quote *value* as a DOT string id, escaping backslashes and quotes."""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def _node_label(node: Any, attr: str | None) -> str:
    if attr is None:
        return str(node.id)
    return str(getattr(node, attr, node.id))


def render_svg(graph: Graph, cfg: RenderConfig) -> str:
    """Render *graph* as a standalone SVG document string."""
    grid = layout(graph)
    esc = html.escape

    sample = graph.nodes[: cfg.short_label_sample]
    short_labels = all(len(_node_label(n, cfg.node_label)) < cfg.short_label_max for n in sample)

    total_width = grid.max_row_width * cfg.cell_width
    total_height = grid.row_count * cfg.cell_height

    digest = hashlib.sha1(
        "|".join(repr(n.id) for n in graph.nodes).encode("utf-8"), usedforsecurity=False
    ).hexdigest()[:10]
    uid = f"graphfold-{digest}"

    positions: dict[Any, tuple[float, float]] = {}
    for row_num, row in enumerate(grid.rows):
        cell_width = total_width / len(row)
        for col, node in enumerate(row):
            positions[node.id] = (
                col * cell_width + cell_width / 2,
                row_num * cfg.cell_height + cfg.cell_height / 2,
            )

    parts: list[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" id="{uid}" '
        f'width="{total_width:g}" height="{total_height:g}" '
        f'viewBox="0 0 {total_width:g} {total_height:g}">',
        f"<style>{_SVG_STYLE.format(uid=uid)}</style>",
        "<defs>",
        f'<marker id="{uid}-arrowhead" viewBox="0 -5 10 10" refX="8" refY="0" '
        'orient="auto" markerWidth="10" markerHeight="10">',
        '<path d="M 0,-5 L 10,0 L 0,5" fill="currentColor" stroke="none"/>',
        "</marker>",
        "</defs>",
    ]

    pad = cfg.link_padding
    for i, edge in enumerate(graph.edges):
        if edge.source not in positions or edge.target not in positions:
            continue
        sx, sy = positions[edge.source]
        tx, ty = positions[edge.target]
        dx, dy = tx - sx, ty - sy
        hyp = math.hypot(dx, dy)
        ratio = pad / hyp if hyp else 0.0
        x1, y1 = sx + ratio * dx, sy + ratio * dy
        x2, y2 = tx - ratio * dx, ty - ratio * dy
        if not short_labels:
            y1 = sy + pad * 0.75
            y2 = ty - pad * 0.75
        parts.append(
            f'<path class="edgepath" id="{uid}-edgepath{i}" '
            f'd="M {x1:g} {y1:g} L {x2:g} {y2:g}"/>'
        )
        parts.append(
            f'<text class="edgelabel" id="{uid}-edgelabel{i}">'
            f'<textPath href="#{uid}-edgepath{i}" startOffset="50%">{esc(edge.label)}</textPath>'
            "</text>"
        )

    for node in graph.nodes:
        if node.id not in positions:
            continue
        x, y = positions[node.id]
        parts.append(f'<g class="node" transform="translate({x:g}, {y:g})">')
        if short_labels:
            parts.append(f'<circle r="{cfg.node_radius}"/>')
        parts.append(f"<text>{esc(_node_label(node, cfg.node_label))}</text>")
        parts.append("</g>")

    parts.append("</svg>")
    return "\n".join(parts) + "\n"
