"""Default node and edge payload models.

Both are frozen pydantic models that accept arbitrary extra attributes,
so ``Node(id=1, value="-").value`` and ``Edge(source="a", target="b",
count=2).count`` work without declaring fields up front.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from graphfold.domain.types import NodeId


class Node(BaseModel):
    """A graph vertex with a stable identity and free-form attributes."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: NodeId

    @property
    def attrs(self) -> dict[str, Any]:
        """Extra attributes (everything except ``id``)."""
        return dict(self.model_extra or {})


class Edge(BaseModel):
    """A directed connection between two node ids.

    Edges are compared by value (pydantic equality) but tracked by
    instance during traversal: two edges with the same endpoints and
    attributes are still two edges.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    source: NodeId
    target: NodeId

    @property
    def attrs(self) -> dict[str, Any]:
        """Extra attributes (everything except the endpoints)."""
        return dict(self.model_extra or {})

    def reversed(self) -> Edge:
        """Return a copy with source and target swapped."""
        return self.model_copy(update={"source": self.target, "target": self.source})

    @property
    def label(self) -> str:
        """Display label, see :func:`edge_label`."""
        return edge_label(self.model_extra or {})


def edge_label(attrs: Mapping[str, Any]) -> str:
    """``weight``, else ``id``, else the first attribute, else empty."""
    for key in ("weight", "id"):
        if key in attrs:
            return str(attrs[key])
    for value in attrs.values():
        return str(value)
    return ""
