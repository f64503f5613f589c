"""BaseService - shared foundation for graphfold services.

Every service receives a loaded :class:`Graph` and the resolved
:class:`GraphfoldSettings` at construction time. Services never read
files themselves; the command layer loads the graph document first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphfold.services.result import ServiceResult

if TYPE_CHECKING:
    from graphfold.config.settings import GraphfoldSettings
    from graphfold.domain.graph import Graph, NodeRef


def coerce_node_id(graph: Graph, raw: str) -> NodeRef:
    """Map a command-line string onto the graph's id type.

    ``"3"`` becomes ``3`` when the graph knows the integer id 3 but not
    the string; otherwise *raw* is returned unchanged.
    """
    if raw in graph:
        return raw
    try:
        as_int = int(raw)
    except ValueError:
        return raw
    return as_int if as_int in graph else raw


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class GraphService(BaseService):
            def topo(self) -> ServiceResult:
                order = list(self._graph.topological_traverse())
                ...
    """

    def __init__(self, graph: Graph, settings: GraphfoldSettings | None = None) -> None:
        if settings is None:
            from graphfold.config.settings import GraphfoldSettings

            settings = GraphfoldSettings()
        self._graph = graph
        self._settings = settings

    def _node_missing(self, op: str, node: NodeRef) -> ServiceResult | None:
        """Return a NOT_FOUND result when *node* is not in the graph, else None."""
        if node in self._graph:
            return None
        return ServiceResult.failure(
            op,
            "NOT_FOUND",
            f"Node {node!r} not found in graph",
            node_id=node,
        )
