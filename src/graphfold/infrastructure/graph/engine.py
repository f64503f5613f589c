"""NetworkX interop - convert a Graph to and from a MultiDiGraph.

Node order survives the round trip; edges come back grouped by source
node, in insertion order within each group. Parallel edges map onto
MultiDiGraph keys. Exporters go through this view for DOT and D3 JSON
output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

from graphfold.domain.graph import Graph
from graphfold.domain.models import Edge, Node

if TYPE_CHECKING:
    from graphfold.domain.types import Identified

type _MultiGraph = nx.MultiDiGraph


def _node_attrs(node: Identified) -> dict[str, Any]:
    if isinstance(node, Node):
        return node.attrs
    if hasattr(node, "__dict__"):
        return {k: v for k, v in vars(node).items() if k != "id" and not k.startswith("_")}
    return {}


def to_networkx(graph: Graph) -> _MultiGraph:
    """Build a MultiDiGraph with node and edge attributes copied over.

    Every node is added first so isolated nodes stay visible to
    NetworkX algorithms. Attributes travel as data dicts, so names such
    as ``key`` stay attributes instead of becoming multigraph keys.
    """
    g: _MultiGraph = nx.MultiDiGraph()
    g.add_nodes_from((node.id, _node_attrs(node)) for node in graph.nodes if node.id not in g)
    g.add_edges_from((edge.source, edge.target, edge.attrs) for edge in graph.edges)
    return g


def from_networkx(g: nx.DiGraph | nx.MultiDiGraph) -> Graph:
    """Build a Graph from any directed NetworkX graph.

    Raises:
        ValueError: If *g* is undirected.
    """
    if not g.is_directed():
        msg = "from_networkx() requires a directed graph"
        raise ValueError(msg)
    nodes = [Node.model_validate({**attrs, "id": node_id}) for node_id, attrs in g.nodes(data=True)]
    edges = [
        Edge.model_validate({**attrs, "source": u, "target": v})
        for u, v, attrs in g.edges(data=True)
    ]
    return Graph(nodes=nodes, edges=edges)
