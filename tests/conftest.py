"""Shared pytest fixtures and sample graphs for graphfold tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from graphfold.domain.graph import Graph

# ---------------------------------------------------------------------------
# Sample graph documents
# ---------------------------------------------------------------------------

SAMPLE_GRAPHS: dict[str, dict[str, Any]] = {
    "EmptyGraph": {"nodes": [], "edges": []},
    "TwoNodeCycle": {
        "nodes": [{"id": 1}, {"id": 2}],
        "edges": [
            {"source": 1, "target": 2},
            {"source": 2, "target": 1},
        ],
    },
    "ThreeNodeCycle": {
        "nodes": [{"id": 1}, {"id": 2}, {"id": 3}],
        "edges": [
            {"source": 1, "target": 2},
            {"source": 2, "target": 3},
            {"source": 3, "target": 1},
        ],
    },
    # (45 + 15) - (9 * 2)
    "ReadmeMathExample": {
        "nodes": [
            {"id": 1, "value": "-"},
            {"id": 2, "value": "+"},
            {"id": 3, "value": "*"},
            {"id": 4, "value": 45},
            {"id": 5, "value": 15},
            {"id": 6, "value": 9},
            {"id": 7, "value": 2},
        ],
        "edges": [
            {"source": 1, "target": 2},
            {"source": 1, "target": 3},
            {"source": 2, "target": 4},
            {"source": 2, "target": 5},
            {"source": 3, "target": 6},
            {"source": 3, "target": 7},
        ],
    },
    # Bag rules: "light red bags contain 1 bright white bag, 2 muted yellow bags." etc.
    "FullAoc2020Example": {
        "nodes": [
            {"id": "light red"},
            {"id": "bright white"},
            {"id": "muted yellow"},
            {"id": "dark orange"},
            {"id": "shiny gold"},
            {"id": "faded blue"},
            {"id": "dark olive"},
            {"id": "dotted black"},
            {"id": "vibrant plum"},
        ],
        "edges": [
            {"source": "light red", "target": "bright white", "count": 1},
            {"source": "light red", "target": "muted yellow", "count": 2},
            {"source": "dark orange", "target": "bright white", "count": 3},
            {"source": "dark orange", "target": "muted yellow", "count": 4},
            {"source": "bright white", "target": "shiny gold", "count": 1},
            {"source": "muted yellow", "target": "shiny gold", "count": 2},
            {"source": "muted yellow", "target": "faded blue", "count": 9},
            {"source": "shiny gold", "target": "dark olive", "count": 1},
            {"source": "shiny gold", "target": "vibrant plum", "count": 2},
            {"source": "dark olive", "target": "faded blue", "count": 3},
            {"source": "dark olive", "target": "dotted black", "count": 4},
            {"source": "vibrant plum", "target": "faded blue", "count": 5},
            {"source": "vibrant plum", "target": "dotted black", "count": 6},
        ],
    },
}

CHAIN_COLORS = [
    "shiny gold",
    "dark red",
    "dark orange",
    "dark yellow",
    "dark green",
    "dark blue",
    "dark violet",
]


def sample_graph(name: str) -> Graph:
    """Build a fresh Graph from one of the sample documents."""
    doc = SAMPLE_GRAPHS[name]
    return Graph(nodes=doc["nodes"], edges=doc["edges"])


def chain_graph() -> Graph:
    """Seven bags, each containing two of the next one."""
    edges = [
        {"source": a, "target": b, "count": 2}
        for a, b in zip(CHAIN_COLORS, CHAIN_COLORS[1:], strict=False)
    ]
    return Graph(nodes=CHAIN_COLORS, edges=edges)


def ids(nodes: Any) -> list[Any]:
    """Node ids of an iterable of nodes."""
    return [n.id for n in nodes]


def endpoints(edges: Any) -> list[tuple[Any, Any]]:
    """``(source, target)`` pairs of an iterable of edges."""
    return [(e.source, e.target) for e in edges]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def aoc_graph() -> Graph:
    return sample_graph("FullAoc2020Example")


@pytest.fixture
def math_graph() -> Graph:
    return sample_graph("ReadmeMathExample")


@pytest.fixture
def write_graph(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Factory writing a sample (or literal) graph document as JSON.

    Usage::

        path = write_graph("FullAoc2020Example")
        path = write_graph({"edges": [[1, 2]]}, name="tiny.json")
    """

    def _write(doc: str | dict[str, Any], *, name: str = "graph.json") -> Path:
        data = SAMPLE_GRAPHS[doc] if isinstance(doc, str) else doc
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so a stray ``graphfold.toml`` never leaks into results.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GRAPHFOLD_CONFIG", raising=False)
