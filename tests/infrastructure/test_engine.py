"""Tests for NetworkX interop."""

from __future__ import annotations

import networkx as nx
import pytest

from graphfold.domain.graph import Graph
from graphfold.infrastructure.graph.engine import from_networkx, to_networkx
from tests.conftest import endpoints, ids, sample_graph


class TestToNetworkx:
    def test_counts(self) -> None:
        g = to_networkx(sample_graph("FullAoc2020Example"))
        assert isinstance(g, nx.MultiDiGraph)
        assert g.number_of_nodes() == 9
        assert g.number_of_edges() == 13

    def test_attributes_copied(self) -> None:
        g = to_networkx(sample_graph("ReadmeMathExample"))
        assert g.nodes[1]["value"] == "-"
        g2 = to_networkx(sample_graph("FullAoc2020Example"))
        assert g2["shiny gold"]["vibrant plum"][0]["count"] == 2

    def test_isolated_nodes_kept(self) -> None:
        g = to_networkx(Graph(nodes=["a", "b"], edges=[]))
        assert list(g.nodes) == ["a", "b"]

    def test_parallel_edges(self) -> None:
        g = to_networkx(Graph.from_edges([("a", "b"), ("a", "b", {"count": 2})]))
        assert g.number_of_edges("a", "b") == 2

    def test_attribute_named_key_is_data(self) -> None:
        g = to_networkx(Graph.from_edges([("a", "b", {"key": 1}), ("a", "b", {"key": 1})]))
        assert g.number_of_edges("a", "b") == 2
        assert [attrs for _, _, attrs in g.edges(data=True)] == [{"key": 1}, {"key": 1}]

    def test_node_attribute_named_like_networkx_parameter(self) -> None:
        g = to_networkx(Graph(nodes=[{"id": "a", "node_for_adding": "x"}], edges=[]))
        assert g.nodes["a"] == {"node_for_adding": "x"}

    def test_agrees_with_networkx_topological_sort(self) -> None:
        graph = sample_graph("FullAoc2020Example")
        g = to_networkx(graph)
        order = ids(graph.topological_traverse())
        assert nx.is_directed_acyclic_graph(g)
        position = {node_id: i for i, node_id in enumerate(order)}
        assert all(position[u] < position[v] for u, v in g.edges())


class TestFromNetworkx:
    def test_digraph(self) -> None:
        g = nx.DiGraph()
        g.add_node("x", label="start")
        g.add_edge("x", "y", count=3)
        graph = from_networkx(g)
        assert ids(graph.nodes) == ["x", "y"]
        assert graph.find_node("x").label == "start"
        assert graph.edges[0].count == 3

    def test_round_trip(self) -> None:
        graph = sample_graph("FullAoc2020Example")
        rebuilt = from_networkx(to_networkx(graph))
        assert ids(rebuilt.nodes) == ids(graph.nodes)
        assert sorted((e.source, e.target, e.count) for e in rebuilt.edges) == sorted(
            (e.source, e.target, e.count) for e in graph.edges
        )

    def test_edges_grouped_by_source(self) -> None:
        rebuilt = from_networkx(to_networkx(sample_graph("FullAoc2020Example")))
        assert endpoints(rebuilt.edges)[:3] == [
            ("light red", "bright white"),
            ("light red", "muted yellow"),
            ("bright white", "shiny gold"),
        ]

    def test_undirected_rejected(self) -> None:
        with pytest.raises(ValueError, match="directed"):
            from_networkx(nx.Graph())
