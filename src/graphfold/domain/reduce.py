"""Reduce - fold per-node and per-edge values along the best-effort walk.

Each node's value is computed from the values delivered by its incoming
edges; each edge's value is computed from its source node's value. The
result is the value of the graph's single sink.

Push evaluation (roots toward sinks) reduces the graph as is. Pull
evaluation (an expression tree whose operators consume operand values)
reduces ``graph.reverse()`` so leaves feed the original root.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from graphfold.domain.errors import AmbiguousOutputError
from graphfold.domain.traversal import walk
from graphfold.domain.types import NodeId

if TYPE_CHECKING:
    from graphfold.domain.graph import Graph
    from graphfold.domain.models import Edge

logger = logging.getLogger(__name__)

type NodeReducer[T] = Callable[[list[T | None], Any], T]
type EdgeReducer[T] = Callable[[T, Edge], T]


def pass_through[T](source_value: T, edge: Edge) -> T:
    """Default edge reducer: deliver the source node's value unchanged."""
    return source_value


def reduce_graph[T](
    graph: Graph,
    nodes: NodeReducer[T],
    edges: EdgeReducer[T] | None = None,
    *,
    initial: T = 0,  # type: ignore[assignment]
) -> T:
    """Compute one aggregate value for *graph*.

    Args:
        graph: The graph to fold.
        nodes: ``nodes(input_values, node)``. *input_values* follows the
            node's incoming-edge order; an entry is None when that edge
            has not been visited yet, which only happens on cycles.
        edges: ``edges(source_value, edge)``. Defaults to
            :func:`pass_through`.
        initial: Returned for an empty graph.

    Returns:
        The single sink's value. With no sink at all (every node is on
        a cycle) the value of the last node visited is returned instead.

    Raises:
        AmbiguousOutputError: When the graph has more than one sink.
    """
    edge_fn: EdgeReducer[T] = edges if edges is not None else pass_through
    node_values: dict[NodeId, T] = {}
    edge_values: dict[int, T] = {}
    last_value: T = initial

    for visit in walk(graph):
        if visit.is_node:
            node = visit.item
            inputs = [edge_values.get(id(e)) for e in graph.in_edges(node)]
            value = nodes(inputs, node)
            node_values[node.id] = value
            last_value = value
        else:
            edge = visit.item
            # The walk emits an edge right after its source node.
            assert edge.source in node_values, f"edge visited before its source {edge.source!r}"
            edge_values[id(edge)] = edge_fn(node_values[edge.source], edge)

    sinks = graph.sinks()
    if not sinks:
        if graph.nodes:
            logger.debug("reduce: no sink node, returning last visited value")
        return last_value
    if len(sinks) == 1:
        return node_values[sinks[0].id]
    raise AmbiguousOutputError(s.id for s in sinks)
