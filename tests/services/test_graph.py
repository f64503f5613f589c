"""Tests for GraphService - traversal, slicing, reversal, reduction."""

from __future__ import annotations

from graphfold.config.models import ReduceConfig
from graphfold.config.settings import GraphfoldSettings
from graphfold.domain.graph import Graph
from graphfold.services.graph import GraphService
from tests.conftest import chain_graph, sample_graph


def _service(name: str) -> GraphService:
    return GraphService(sample_graph(name), GraphfoldSettings())


class TestInfo:
    def test_acyclic_summary(self) -> None:
        result = _service("FullAoc2020Example").info()
        assert result.ok
        assert result.op == "info"
        assert result.data["node_count"] == 9
        assert result.data["edge_count"] == 13
        assert result.data["sources"] == ["light red", "dark orange"]
        assert result.data["sinks"] == ["faded blue", "dotted black"]
        assert result.data["acyclic"] is True

    def test_cyclic_summary(self) -> None:
        result = _service("TwoNodeCycle").info()
        assert result.ok
        assert result.data["acyclic"] is False
        assert result.data["sources"] == []


class TestTopo:
    def test_order(self) -> None:
        result = _service("ReadmeMathExample").topo()
        assert result.ok
        assert result.data["count"] == 7
        assert [item["id"] for item in result.data["items"]] == [1, 2, 3, 4, 5, 6, 7]

    def test_cycle_is_error_result(self) -> None:
        result = _service("ThreeNodeCycle").topo()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CYCLE_DETECTED"
        assert result.error.detail["remaining"] == [1, 2, 3]


class TestWalk:
    def test_unanchored(self) -> None:
        result = _service("ThreeNodeCycle").walk()
        assert result.ok
        assert result.data["count"] == 6
        assert result.data["node_count"] == 3
        assert result.data["items"][0] == {"kind": "node", "id": 1}
        assert result.data["items"][1] == {"kind": "edge", "source": 1, "target": 2}
        assert "start" not in result.data

    def test_anchored_includes_edge_attrs(self) -> None:
        result = _service("FullAoc2020Example").walk("dark olive")
        assert result.ok
        assert result.data["start"] == "dark olive"
        assert result.data["node_count"] == 3
        assert result.data["items"][1] == {
            "kind": "edge",
            "source": "dark olive",
            "target": "faded blue",
            "attrs": {"count": 3},
        }

    def test_missing_start(self) -> None:
        result = _service("FullAoc2020Example").walk("plaid")
        assert not result.ok
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail["node_id"] == "plaid"


class TestSliceAndReverse:
    def test_slice(self) -> None:
        result = _service("FullAoc2020Example").slice("dark olive")
        assert result.ok
        assert result.data["start"] == "dark olive"
        assert result.data["node_count"] == 3
        assert result.data["edge_count"] == 2
        assert [n["id"] for n in result.data["graph"]["nodes"]] == [
            "dark olive",
            "faded blue",
            "dotted black",
        ]

    def test_slice_missing_start(self) -> None:
        result = _service("FullAoc2020Example").slice("plaid")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_reverse(self) -> None:
        result = _service("TwoNodeCycle").reverse()
        assert result.ok
        assert result.data["graph"]["edges"] == [
            {"source": 2, "target": 1},
            {"source": 1, "target": 2},
        ]


class TestReduce:
    def test_bag_count_from_slice(self) -> None:
        result = _service("FullAoc2020Example").reduce(
            node_op="count", edge_op="weight", reverse=True, start="shiny gold"
        )
        assert result.ok
        assert result.data["value"] == 33
        assert result.data["weight_attr"] == "count"
        assert result.data["reversed"] is True
        assert result.data["start"] == "shiny gold"

    def test_chain(self) -> None:
        service = GraphService(chain_graph(), GraphfoldSettings())
        assert service.reduce(edge_op="weight", reverse=True).data["value"] == 127

    def test_expression_tree(self) -> None:
        result = _service("ReadmeMathExample").reduce(node_op="expr", reverse=True)
        assert result.ok
        assert result.data["value"] == 42
        assert "weight_attr" not in result.data

    def test_concat_on_cycle_warns(self) -> None:
        result = _service("ThreeNodeCycle").reduce(node_op="concat")
        assert result.ok
        assert result.data["value"] == "123"
        assert len(result.warnings) == 1
        assert "no sink" in result.warnings[0]

    def test_empty_graph_uses_op_initial(self) -> None:
        result = GraphService(Graph(), GraphfoldSettings()).reduce(node_op="concat")
        assert result.ok
        assert result.data["value"] == ""
        assert result.warnings == []

    def test_multiple_sinks(self) -> None:
        result = _service("FullAoc2020Example").reduce()
        assert not result.ok
        assert result.error.code == "AMBIGUOUS_OUTPUT"
        assert result.error.detail["sinks"] == ["faded blue", "dotted black"]

    def test_unknown_node_op(self) -> None:
        result = _service("ThreeNodeCycle").reduce(node_op="median")
        assert result.error.code == "UNKNOWN_REDUCER"
        assert "count" in result.error.detail["valid"]

    def test_unknown_edge_op(self) -> None:
        result = _service("ThreeNodeCycle").reduce(edge_op="halve")
        assert result.error.code == "UNKNOWN_REDUCER"
        assert result.error.detail["valid"] == ["pass", "weight"]

    def test_missing_start(self) -> None:
        result = _service("FullAoc2020Example").reduce(start="plaid")
        assert result.error.code == "NOT_FOUND"

    def test_reducer_failure(self) -> None:
        # Operators at the roots have no operands until the graph is reversed.
        result = _service("ReadmeMathExample").reduce(node_op="expr")
        assert not result.ok
        assert result.error.code == "REDUCE_FAILED"
        assert "ValueError" in result.error.message

    def test_defaults_from_settings(self) -> None:
        settings = GraphfoldSettings(reduce=ReduceConfig(node_op="concat", edge_op="pass"))
        result = GraphService(sample_graph("ThreeNodeCycle"), settings).reduce()
        assert result.data["node_op"] == "concat"
        assert result.data["value"] == "123"
