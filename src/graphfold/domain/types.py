"""Identity types, the node capability protocol, and traversal events.

Anything carrying an ``id`` attribute can be a node. Identity equality
is by the id value, never by instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

type NodeId = str | int


@runtime_checkable
class Identified(Protocol):
    """Capability interface for graph nodes."""

    @property
    def id(self) -> NodeId: ...


def is_node_id(value: object) -> bool:
    """Return True when *value* is a bare identity rather than a node object.

    ``bool`` is excluded even though it subclasses ``int``.
    """
    return isinstance(value, (str, int)) and not isinstance(value, bool)


class VisitKind(StrEnum):
    """Kinds of events emitted by the best-effort walk."""

    NODE = "node"
    EDGE = "edge"


@dataclass(frozen=True, slots=True)
class Visit:
    """A single walk event: a node visit or an edge visit."""

    kind: VisitKind
    item: Any

    @property
    def is_node(self) -> bool:
        return self.kind is VisitKind.NODE

    @property
    def is_edge(self) -> bool:
        return self.kind is VisitKind.EDGE
