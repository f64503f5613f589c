"""Tests for the Graph store: construction, lookup, reversal."""

from __future__ import annotations

import pytest

from graphfold.domain.graph import Graph
from graphfold.domain.models import Edge, Node
from tests.conftest import CHAIN_COLORS, chain_graph, endpoints, ids, sample_graph


class Cell:
    def __init__(self, id: int) -> None:
        self.id = id


class TestConstruction:
    def test_empty_graph(self) -> None:
        graph = Graph(nodes=[], edges=[])
        assert graph.nodes == ()
        assert graph.edges == ()
        assert len(graph) == 0

    def test_nodes_inferred_from_mapping_edges(self) -> None:
        graph = Graph(
            edges=[
                {"source": "A", "target": "B"},
                {"source": "B", "target": "C"},
                {"source": "A", "target": "C"},
            ]
        )
        assert graph.nodes == (Node(id="A"), Node(id="B"), Node(id="C"))

    def test_edges_in_array_form(self) -> None:
        graph = Graph.from_edges([["A", "B"], ["B", "C"], ["A", "C"]])
        assert ids(graph.nodes) == ["A", "B", "C"]
        assert graph.edges == (
            Edge(source="A", target="B"),
            Edge(source="B", target="C"),
            Edge(source="A", target="C"),
        )

    def test_class_based_nodes_pass_through(self) -> None:
        a, b = Cell(1), Cell(2)
        graph = Graph(nodes=[a, b], edges=[])
        assert graph.nodes[0] is a
        assert graph.nodes[1] is b

    def test_bare_id_nodes(self) -> None:
        graph = Graph(nodes=[1, "two"], edges=[])
        assert graph.nodes == (Node(id=1), Node(id="two"))

    def test_duplicate_id_first_wins(self) -> None:
        graph = Graph(nodes=[{"id": 1, "tag": "first"}, {"id": 1, "tag": "second"}])
        assert graph.find_node(1).tag == "first"

    def test_repr(self) -> None:
        assert repr(sample_graph("ThreeNodeCycle")) == "Graph(nodes=3, edges=3)"


class TestLookup:
    def test_simplified_bag_chain(self) -> None:
        graph = chain_graph()
        assert len(graph.nodes) == 7
        assert len(graph.edges) == 6
        assert graph.out_edges("shiny gold") == [
            Edge(source="shiny gold", target="dark red", count=2)
        ]
        assert graph.out_edges("dark voilet") == []

    def test_in_edges_in_edge_order(self) -> None:
        graph = sample_graph("FullAoc2020Example")
        assert endpoints(graph.in_edges("faded blue")) == [
            ("muted yellow", "faded blue"),
            ("dark olive", "faded blue"),
            ("vibrant plum", "faded blue"),
        ]

    def test_edge_lookup_accepts_node_objects(self) -> None:
        graph = chain_graph()
        node = graph.find_node("dark red")
        assert graph.in_edges(node) == graph.in_edges("dark red")

    def test_returned_edge_lists_are_copies(self) -> None:
        graph = chain_graph()
        graph.out_edges("shiny gold").clear()
        assert len(graph.out_edges("shiny gold")) == 1

    def test_find_node(self) -> None:
        graph = sample_graph("ReadmeMathExample")
        assert graph.find_node(4).value == 45
        assert graph.find_node(99) is None

    def test_find_node_passes_objects_through(self) -> None:
        cell = Cell(7)
        assert Graph().find_node(cell) is cell

    def test_node_id(self) -> None:
        assert Graph.node_id(3) == 3
        assert Graph.node_id("x") == "x"
        assert Graph.node_id(Cell(5)) == 5

    def test_contains_distinguishes_int_and_str(self) -> None:
        graph = sample_graph("TwoNodeCycle")
        assert 1 in graph
        assert "1" not in graph
        assert Node(id=2) in graph
        assert True not in graph

    def test_sources_and_sinks(self) -> None:
        graph = sample_graph("FullAoc2020Example")
        assert ids(graph.sources()) == ["light red", "dark orange"]
        assert ids(graph.sinks()) == ["faded blue", "dotted black"]

    def test_cycle_has_no_sources_or_sinks(self) -> None:
        graph = sample_graph("ThreeNodeCycle")
        assert graph.sources() == []
        assert graph.sinks() == []


class TestReverse:
    def test_flips_every_edge(self) -> None:
        graph = chain_graph()
        reversed_graph = graph.reverse()
        assert endpoints(reversed_graph.edges) == [(b, a) for a, b in endpoints(graph.edges)]

    def test_keeps_attributes_and_nodes(self) -> None:
        graph = chain_graph()
        reversed_graph = graph.reverse()
        assert all(e.count == 2 for e in reversed_graph.edges)
        assert ids(reversed_graph.nodes) == CHAIN_COLORS
        assert reversed_graph.nodes[0] is graph.nodes[0]

    def test_does_not_mutate_original(self) -> None:
        graph = chain_graph()
        graph.reverse()
        assert graph.out_edges("shiny gold")[0].target == "dark red"

    @pytest.mark.parametrize("name", ["FullAoc2020Example", "ThreeNodeCycle", "EmptyGraph"])
    def test_double_reverse_restores_edges(self, name: str) -> None:
        graph = sample_graph(name)
        assert graph.reverse().reverse().edges == graph.edges
