"""GraphService - traversal, slicing, reversal and reduction over one graph.

Wraps the domain engine for the CLI: every method returns a
:class:`ServiceResult`, converting ``CycleDetectedError`` and
``AmbiguousOutputError`` into structured errors.
"""

from __future__ import annotations

from typing import Any

import structlog

from graphfold.domain.errors import AmbiguousOutputError, CycleDetectedError
from graphfold.domain.graph import Graph, NodeRef
from graphfold.infrastructure.loader import dump_graph
from graphfold.services.base import BaseService
from graphfold.services.reducers import EDGE_OPS, NODE_OP_INITIALS, NODE_OPS, resolve_edge_op
from graphfold.services.result import ServiceResult

log = structlog.get_logger(__name__)


def _node_item(node: Any) -> dict[str, Any]:
    return {"kind": "node", "id": node.id}


def _edge_item(edge: Any) -> dict[str, Any]:
    item: dict[str, Any] = {"kind": "edge", "source": edge.source, "target": edge.target}
    if edge.attrs:
        item["attrs"] = edge.attrs
    return item


class GraphService(BaseService):
    """Handles traversal and reduction queries."""

    # ------------------------------------------------------------------
    # info
    # ------------------------------------------------------------------

    def info(self) -> ServiceResult:
        """Summarize the graph: counts, sources, sinks, acyclicity."""
        g = self._graph
        try:
            for _ in g.topological_traverse():
                pass
            acyclic = True
        except CycleDetectedError:
            acyclic = False

        return ServiceResult(
            ok=True,
            op="info",
            data={
                "node_count": len(g.nodes),
                "edge_count": len(g.edges),
                "sources": [n.id for n in g.sources()],
                "sinks": [n.id for n in g.sinks()],
                "acyclic": acyclic,
            },
        )

    # ------------------------------------------------------------------
    # topo - strict topological order
    # ------------------------------------------------------------------

    def topo(self) -> ServiceResult:
        """Strict topological order; CYCLE_DETECTED when impossible."""
        try:
            order = [n.id for n in self._graph.topological_traverse()]
        except CycleDetectedError as exc:
            log.info("topo.cycle", remaining=len(exc.remaining))
            return ServiceResult.failure(
                "topo",
                "CYCLE_DETECTED",
                str(exc),
                remaining=list(exc.remaining),
            )

        return ServiceResult(
            ok=True,
            op="topo",
            data={"count": len(order), "items": [{"id": node_id} for node_id in order]},
        )

    # ------------------------------------------------------------------
    # walk - best-effort visit events
    # ------------------------------------------------------------------

    def walk(self, start: NodeRef | None = None) -> ServiceResult:
        """Cycle-tolerant visit events, optionally anchored at *start*."""
        if start is not None and (missing := self._node_missing("walk", start)):
            return missing

        items = [
            _node_item(v.item) if v.is_node else _edge_item(v.item)
            for v in self._graph.walk(start)
        ]
        data: dict[str, Any] = {
            "count": len(items),
            "node_count": sum(1 for i in items if i["kind"] == "node"),
            "items": items,
        }
        if start is not None:
            data["start"] = start
        return ServiceResult(ok=True, op="walk", data=data)

    # ------------------------------------------------------------------
    # slice / reverse - graph-to-graph
    # ------------------------------------------------------------------

    def slice(self, start: NodeRef) -> ServiceResult:
        """Subgraph reachable from *start*, as a graph document."""
        if missing := self._node_missing("slice", start):
            return missing
        sliced = self._graph.slice(start)
        return ServiceResult(
            ok=True,
            op="slice",
            data={"start": start, **self._graph_payload(sliced)},
        )

    def reverse(self) -> ServiceResult:
        """The graph with every edge flipped, as a graph document."""
        return ServiceResult(ok=True, op="reverse", data=self._graph_payload(self._graph.reverse()))

    @staticmethod
    def _graph_payload(graph: Graph) -> dict[str, Any]:
        return {
            "node_count": len(graph.nodes),
            "edge_count": len(graph.edges),
            "graph": dump_graph(graph),
        }

    # ------------------------------------------------------------------
    # reduce - built-in reducers by name
    # ------------------------------------------------------------------

    def reduce(
        self,
        *,
        node_op: str | None = None,
        edge_op: str | None = None,
        weight_attr: str | None = None,
        reverse: bool = False,
        start: NodeRef | None = None,
    ) -> ServiceResult:
        """Fold the graph with named reducers.

        Args:
            node_op: One of ``count``, ``sum``, ``concat``, ``expr``.
            edge_op: ``pass`` or ``weight``.
            weight_attr: Edge attribute used by the ``weight`` edge op.
            reverse: Reduce the reversed graph (pull evaluation).
            start: Slice from this node before anything else.

        Defaults come from the ``[reduce]`` config section.
        """
        cfg = self._settings.reduce
        node_op = node_op or cfg.node_op
        edge_op = edge_op or cfg.edge_op
        weight_attr = weight_attr or cfg.edge_weight_attr

        node_fn = NODE_OPS.get(node_op)
        if node_fn is None:
            return ServiceResult.failure(
                "reduce",
                "UNKNOWN_REDUCER",
                f"Unknown node op: {node_op}",
                node_op=node_op,
                valid=sorted(NODE_OPS),
            )
        edge_fn = resolve_edge_op(edge_op, weight_attr=weight_attr)
        if edge_fn is None:
            return ServiceResult.failure(
                "reduce",
                "UNKNOWN_REDUCER",
                f"Unknown edge op: {edge_op}",
                edge_op=edge_op,
                valid=list(EDGE_OPS),
            )

        graph = self._graph
        if start is not None:
            if missing := self._node_missing("reduce", start):
                return missing
            graph = graph.slice(start)
        if reverse:
            graph = graph.reverse()

        warnings: list[str] = []
        if graph.nodes and not graph.sinks():
            warnings.append("Graph has no sink node; result is the last node visited")

        try:
            value = graph.reduce(node_fn, edge_fn, initial=NODE_OP_INITIALS[node_op])
        except AmbiguousOutputError as exc:
            return ServiceResult.failure(
                "reduce",
                "AMBIGUOUS_OUTPUT",
                str(exc),
                sinks=list(exc.sinks),
            )
        except (ArithmeticError, TypeError, ValueError) as exc:
            log.debug("reduce.failed", node_op=node_op, edge_op=edge_op, exc_info=True)
            return ServiceResult.failure(
                "reduce",
                "REDUCE_FAILED",
                f"Reducer raised {type(exc).__name__}: {exc}",
            )

        data: dict[str, Any] = {
            "value": value,
            "node_op": node_op,
            "edge_op": edge_op,
            "reversed": reverse,
        }
        if edge_op == "weight":
            data["weight_attr"] = weight_attr
        if start is not None:
            data["start"] = start
        return ServiceResult(ok=True, op="reduce", data=data, warnings=warnings)
