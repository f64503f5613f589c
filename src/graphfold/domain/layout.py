"""Layered layout - assign each node a row and a column for rendering.

Rows follow the unanchored walk: a node lands one row below the deepest
predecessor placed so far, or on row 0 when none of its predecessors
has been placed yet (a root, or the node that broke a cycle). Columns
are positions within a row in visit order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graphfold.domain.traversal import walk_nodes
from graphfold.domain.types import Identified, NodeId

if TYPE_CHECKING:
    from graphfold.domain.graph import Graph


@dataclass(frozen=True)
class Placement:
    """Grid cell of one node."""

    row: int
    column: int
    row_size: int


@dataclass
class Layout:
    """Rows of nodes plus a per-id placement index."""

    rows: list[list[Identified]] = field(default_factory=list)
    placements: dict[NodeId, Placement] = field(default_factory=dict)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def max_row_width(self) -> int:
        return max((len(r) for r in self.rows), default=0)


def layout(graph: Graph) -> Layout:
    """Compute the layered layout of *graph*."""
    node_rows: dict[NodeId, int] = {}
    rows: list[list[Identified]] = []

    for node in walk_nodes(graph):
        placed = [node_rows[e.source] for e in graph.in_edges(node) if e.source in node_rows]
        row = max(placed) + 1 if placed else 0
        node_rows[node.id] = row
        while len(rows) <= row:
            rows.append([])
        rows[row].append(node)

    placements: dict[NodeId, Placement] = {}
    for row_num, row_nodes in enumerate(rows):
        for col, node in enumerate(row_nodes):
            placements[node.id] = Placement(row=row_num, column=col, row_size=len(row_nodes))

    return Layout(rows=rows, placements=placements)
