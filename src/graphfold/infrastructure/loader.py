"""Graph document I/O - read graph files into a Graph, and back to dicts.

A graph document is a mapping with ``edges`` and optionally ``nodes``::

    nodes:
      - {id: 1, value: "-"}
      - 2
    edges:
      - {source: 1, target: 2}
      - [2, 3, {count: 4}]

Supported file types: ``.json``, ``.yaml`` / ``.yml``, ``.toml``.
When ``nodes`` is missing the node sequence is inferred from the edges.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from graphfold.domain.errors import GraphDocumentError
from graphfold.domain.graph import Graph
from graphfold.domain.models import Node

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES: frozenset[str] = frozenset({".json", ".yaml", ".yml", ".toml"})


def read_document(path: Path) -> dict[str, Any]:
    """Parse *path* into a raw document mapping.

    Raises:
        GraphDocumentError: Unknown suffix, unreadable file, or a
            syntax error in the file.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        expected = ", ".join(sorted(SUPPORTED_SUFFIXES))
        msg = f"Unsupported graph file type '{suffix}' (expected one of {expected})"
        raise GraphDocumentError(msg)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read {path}: {exc}"
        raise GraphDocumentError(msg) from exc

    try:
        if suffix == ".json":
            data = json.loads(raw)
        elif suffix == ".toml":
            data = tomllib.loads(raw)
        else:
            data = YAML(typ="safe").load(raw)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, YAMLError) as exc:
        msg = f"Invalid {suffix.lstrip('.')} in {path}: {exc}"
        raise GraphDocumentError(msg) from exc

    if not isinstance(data, Mapping):
        msg = f"Graph document {path} must be a mapping with 'nodes' and 'edges'"
        raise GraphDocumentError(msg)
    return dict(data)


def graph_from_document(data: Mapping[str, Any]) -> Graph:
    """Build a Graph from a parsed document mapping.

    Raises:
        GraphDocumentError: Missing or malformed ``edges`` / ``nodes``.
    """
    edges = data.get("edges", [])
    nodes = data.get("nodes")
    if not isinstance(edges, list):
        raise GraphDocumentError("'edges' must be a list")
    if nodes is not None and not isinstance(nodes, list):
        raise GraphDocumentError("'nodes' must be a list")

    try:
        return Graph(nodes=nodes, edges=edges)
    except (ValidationError, ValueError, TypeError) as exc:
        msg = f"Malformed graph document: {exc}"
        raise GraphDocumentError(msg) from exc


def load_graph(path: Path) -> Graph:
    """Read and build the graph stored at *path*."""
    graph = graph_from_document(read_document(path))
    logger.debug("Loaded %r from %s", graph, path)
    return graph


def dump_graph(graph: Graph) -> dict[str, Any]:
    """Return the document form of *graph* (JSON-serializable when attrs are)."""
    return {
        "nodes": [_dump_node(n) for n in graph.nodes],
        "edges": [e.model_dump() for e in graph.edges],
    }


def _dump_node(node: Any) -> dict[str, Any]:
    """Serialize a node: pydantic models dump, other objects expose ``id`` + vars."""
    if isinstance(node, Node):
        return node.model_dump()
    if not hasattr(node, "__dict__"):
        return {"id": node.id}
    attrs = {k: v for k, v in vars(node).items() if not k.startswith("_")}
    return {**attrs, "id": node.id}
