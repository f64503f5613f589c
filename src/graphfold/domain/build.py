"""Construction normalization - turn loose literal forms into nodes and edges.

Pure functions, no infrastructure dependencies. Consumed by
:class:`graphfold.domain.graph.Graph` and by the document loader.

Accepted edge forms::

    Edge(source="a", target="b", count=2)
    {"source": "a", "target": "b", "count": 2}
    ("a", "b")
    ("a", "b", {"count": 2})

Accepted node forms: any object with an ``id``, a mapping with an
``id`` key, or a bare id.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from graphfold.domain.models import Edge, Node
from graphfold.domain.types import Identified, NodeId, is_node_id


def uniq[T](items: Iterable[T], key: Callable[[T], Hashable] | None = None) -> list[T]:
    """Stable de-duplication: the first item with a given key is kept."""
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in items:
        k = key(item) if key is not None else item
        if k not in seen:
            seen.add(k)
            result.append(item)  # type: ignore[arg-type]
    return result


def normalize_edge(raw: Any) -> Edge:
    """Coerce one edge literal into an :class:`Edge`.

    Raises:
        ValueError: For a tuple/list of the wrong length or a mapping
            missing its endpoints (pydantic's ``ValidationError``).
        TypeError: For any other type.
    """
    if isinstance(raw, Edge):
        return raw
    if isinstance(raw, Mapping):
        return Edge.model_validate(dict(raw))
    if isinstance(raw, (list, tuple)):
        if len(raw) not in (2, 3):
            msg = f"Edge tuple must be (source, target[, attrs]), got {len(raw)} items"
            raise ValueError(msg)
        attrs = raw[2] if len(raw) == 3 and raw[2] is not None else {}
        if not isinstance(attrs, Mapping):
            msg = f"Edge attributes must be a mapping, got {type(attrs).__name__}"
            raise ValueError(msg)
        return Edge.model_validate({**attrs, "source": raw[0], "target": raw[1]})
    msg = f"Unsupported edge form: {type(raw).__name__}"
    raise TypeError(msg)


def normalize_node(raw: Any) -> Identified:
    """Coerce one node literal into something carrying an ``id``.

    Objects that already expose ``id`` (class instances, :class:`Node`)
    pass through untouched so callers keep their own payload types.
    """
    if is_node_id(raw):
        return Node(id=raw)
    if isinstance(raw, Mapping):
        return Node.model_validate(dict(raw))
    if isinstance(raw, Identified):
        return raw
    msg = f"Unsupported node form: {type(raw).__name__}"
    raise TypeError(msg)


def nodes_from_edges(edges: Iterable[Edge]) -> list[Node]:
    """Infer the node sequence from edge endpoints in first-appearance order."""
    ids: list[NodeId] = []
    for edge in edges:
        ids.append(edge.source)
        ids.append(edge.target)
    return [Node(id=node_id) for node_id in uniq(ids)]
