"""Graph - an immutable ordered node sequence plus an ordered edge sequence.

Indices (id -> node, id -> outgoing edges, id -> incoming edges) are
built once at construction. Every downstream component depends only on
the read interface below; nothing mutates a Graph after ``__init__``.

INVARIANT: node order is the tie-break for every traversal ambiguity.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from graphfold.domain.build import nodes_from_edges, normalize_edge, normalize_node
from graphfold.domain.models import Edge
from graphfold.domain.types import Identified, NodeId, Visit, is_node_id

type NodeRef = NodeId | Identified


class Graph:
    """Directed multigraph over nodes identified by ``id``.

    Args:
        nodes: Node literals (objects with ``id``, mappings, or bare ids).
            When omitted the node sequence is inferred from edge
            endpoints in first-appearance order.
        edges: Edge literals (:class:`Edge`, mappings, or
            ``(source, target[, attrs])`` tuples).
    """

    __slots__ = ("_edges", "_in", "_nodes", "_out", "_by_id")

    def __init__(
        self,
        nodes: Iterable[Any] | None = None,
        edges: Iterable[Any] = (),
    ) -> None:
        self._edges: tuple[Edge, ...] = tuple(normalize_edge(e) for e in edges)
        if nodes is None:
            self._nodes: tuple[Identified, ...] = tuple(nodes_from_edges(self._edges))
        else:
            self._nodes = tuple(normalize_node(n) for n in nodes)

        # First node wins on duplicate ids, matching a linear scan.
        self._by_id: dict[NodeId, Identified] = {}
        for node in self._nodes:
            self._by_id.setdefault(node.id, node)

        self._out: dict[NodeId, list[Edge]] = {}
        self._in: dict[NodeId, list[Edge]] = {}
        for edge in self._edges:
            self._out.setdefault(edge.source, []).append(edge)
            self._in.setdefault(edge.target, []).append(edge)

    @classmethod
    def from_edges(cls, edges: Iterable[Any]) -> Graph:
        """Build a graph whose nodes are inferred from *edges*."""
        return cls(nodes=None, edges=edges)

    # ------------------------------------------------------------------
    # Sequences
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> tuple[Identified, ...]:
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        if is_node_id(node):
            return node in self._by_id
        return isinstance(node, Identified) and node.id in self._by_id

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @staticmethod
    def node_id(node: NodeRef) -> NodeId:
        """Return the identity of *node* (ids pass through unchanged)."""
        if is_node_id(node):
            return node  # type: ignore[return-value]
        return node.id  # type: ignore[union-attr]

    def find_node(self, node: NodeRef) -> Identified | None:
        """Resolve an id to its node; node objects pass through unchanged.

        Returns None when no node carries the id.
        """
        if is_node_id(node):
            return self._by_id.get(node)  # type: ignore[arg-type]
        return node  # type: ignore[return-value]

    def out_edges(self, node: NodeRef) -> list[Edge]:
        """Edges leaving *node*, in edge insertion order."""
        return list(self._out.get(self.node_id(node), ()))

    def in_edges(self, node: NodeRef) -> list[Edge]:
        """Edges entering *node*, in edge insertion order."""
        return list(self._in.get(self.node_id(node), ()))

    def sinks(self) -> list[Identified]:
        """Nodes with no outgoing edges, in node order."""
        return [n for n in self._nodes if not self._out.get(n.id)]

    def sources(self) -> list[Identified]:
        """Nodes with no incoming edges, in node order."""
        return [n for n in self._nodes if not self._in.get(n.id)]

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def reverse(self) -> Graph:
        """Return a new graph with every edge's direction flipped.

        The node sequence (and node instances) are shared; edges are
        fresh copies keeping all of their other attributes.
        """
        return Graph(nodes=self._nodes, edges=[e.reversed() for e in self._edges])

    # ------------------------------------------------------------------
    # Traversal and reduction (see graphfold.domain.traversal / reduce)
    # ------------------------------------------------------------------

    def topological_traverse(self) -> Iterator[Identified]:
        """Strict topological order; raises CycleDetectedError on cycles."""
        from graphfold.domain.traversal import topological_traverse

        return topological_traverse(self)

    def walk(self, start: NodeRef | None = None) -> Iterator[Visit]:
        """Cycle-tolerant node/edge visit events (optionally anchored)."""
        from graphfold.domain.traversal import walk

        return walk(self, start)

    def slice(self, start: NodeRef) -> Graph:
        """Subgraph reachable from *start*."""
        from graphfold.domain.traversal import slice_graph

        return slice_graph(self, start)

    def reduce[T](
        self,
        nodes: Callable[[list[T | None], Any], T],
        edges: Callable[[T, Edge], T] | None = None,
        initial: T = 0,  # type: ignore[assignment]
    ) -> T:
        """Fold values along edges into one result (see :func:`reduce_graph`)."""
        from graphfold.domain.reduce import reduce_graph

        return reduce_graph(self, nodes, edges, initial=initial)
