"""Traversal engine - strict topological order, best-effort walk, slicing.

All traversals are generators over an immutable :class:`Graph`. State
(the "seen" sets) is local to each call, so independent traversals over
the same graph never interfere. Re-invoking a function restarts the
traversal; an exhausted generator cannot be resumed.

Node order is the only tie-break. Neither traversal ever consults a
queue: each step rescans the pending nodes in their original order,
which is what keeps the output reproducible.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from graphfold.domain.errors import CycleDetectedError
from graphfold.domain.types import Identified, NodeId, Visit, VisitKind

if TYPE_CHECKING:
    from graphfold.domain.graph import Graph, NodeRef

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Strict topological order (Kahn-style layering)
# ---------------------------------------------------------------------------


def topological_traverse(graph: Graph) -> Iterator[Identified]:
    """Yield nodes so that every node follows all of its predecessors.

    Each round selects every remaining node whose incoming edges all
    start at already-emitted nodes, and emits that batch in node order.

    Raises:
        CycleDetectedError: When a round selects nothing while nodes
            remain. Raised lazily, at the point of iteration.
    """
    seen: set[NodeId] = set()
    pool: list[Identified] = list(graph.nodes)

    while pool:
        batch = [n for n in pool if all(e.source in seen for e in graph.in_edges(n))]
        if not batch:
            remaining = [n.id for n in pool]
            logger.debug("topological_traverse: no progress with %d node(s) left", len(remaining))
            raise CycleDetectedError(remaining)

        emitted = {id(n) for n in batch}
        pool = [n for n in pool if id(n) not in emitted]
        for node in batch:
            seen.add(node.id)
            yield node


# ---------------------------------------------------------------------------
# Best-effort walk (cycle tolerant)
# ---------------------------------------------------------------------------


def walk(graph: Graph, start: NodeRef | None = None) -> Iterator[Visit]:
    """Yield node and edge visits, tolerating cycles and never failing.

    Each node visit is immediately followed by visits of its outgoing
    edges in edge order. Every node and every edge is visited at most
    once.

    Unanchored (*start* is None): the next node is the first unvisited
    node whose incoming edges have all been visited; when none
    qualifies (a cycle), the first unvisited node is taken anyway. All
    nodes and edges are visited.

    Anchored: *start* is visited first, then repeatedly the first
    unvisited node with at least one visited incoming edge. Stops when
    nothing reachable is left. An anchor absent from the graph yields
    nothing.
    """
    anchor: Identified | None = None
    if start is not None:
        anchor = graph.find_node(start)
        if anchor is None:
            logger.debug("walk: start node %r not in graph", start)
            return

    seen_nodes: set[NodeId] = set()
    seen_edges: set[int] = set()
    pending: list[Identified] = list(graph.nodes)

    def edge_seen(edge: object) -> bool:
        return id(edge) in seen_edges

    while True:
        next_node: Identified | None = None
        if anchor is not None:
            if anchor.id not in seen_nodes:
                next_node = anchor
            else:
                next_node = next(
                    (
                        n
                        for n in pending
                        if n.id not in seen_nodes and any(map(edge_seen, graph.in_edges(n)))
                    ),
                    None,
                )
        else:
            next_node = next(
                (
                    n
                    for n in pending
                    if n.id not in seen_nodes and all(map(edge_seen, graph.in_edges(n)))
                ),
                None,
            )
            if next_node is None:
                next_node = next((n for n in pending if n.id not in seen_nodes), None)
                if next_node is not None:
                    logger.debug("walk: breaking cycle at node %r", next_node.id)

        if next_node is None:
            break

        seen_nodes.add(next_node.id)
        pending = [n for n in pending if n.id not in seen_nodes]
        yield Visit(VisitKind.NODE, next_node)

        for edge in graph.out_edges(next_node):
            seen_edges.add(id(edge))
            yield Visit(VisitKind.EDGE, edge)


def walk_nodes(graph: Graph, start: NodeRef | None = None) -> Iterator[Identified]:
    """Node visits of :func:`walk`, without the edge events."""
    for visit in walk(graph, start):
        if visit.is_node:
            yield visit.item


# ---------------------------------------------------------------------------
# Slice
# ---------------------------------------------------------------------------


def slice_graph(graph: Graph, start: NodeRef) -> Graph:
    """Return the subgraph reachable from *start* (inclusive).

    Nodes and edges keep the order in which the anchored walk emitted
    them. Node instances are shared with *graph*.
    """
    from graphfold.domain.graph import Graph

    nodes: list[Identified] = []
    edges = []
    for visit in walk(graph, start):
        if visit.is_node:
            nodes.append(visit.item)
        else:
            edges.append(visit.item)
    return Graph(nodes=nodes, edges=edges)
