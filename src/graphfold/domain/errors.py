"""Domain exceptions.

Only two traversal-time failures exist: a cycle under strict
topological order, and an ambiguous reduce result. Lookups never raise.
"""

from __future__ import annotations

from collections.abc import Iterable

from graphfold.domain.types import NodeId


class GraphError(Exception):
    """Base class for all graphfold errors."""


class CycleDetectedError(GraphError):
    """Strict topological traversal made no progress while nodes remained."""

    def __init__(self, remaining: Iterable[NodeId]) -> None:
        self.remaining: tuple[NodeId, ...] = tuple(remaining)
        super().__init__(
            f"This graph cannot be topologically traversed: "
            f"{len(self.remaining)} node(s) lie on or behind a cycle"
        )


class AmbiguousOutputError(GraphError):
    """Reduce found more than one sink node, so no single result exists."""

    def __init__(self, sinks: Iterable[NodeId]) -> None:
        self.sinks: tuple[NodeId, ...] = tuple(sinks)
        names = ", ".join(repr(s) for s in self.sinks)
        super().__init__(f"Graph has multiple output nodes: {names}")


class GraphDocumentError(GraphError):
    """A graph document could not be turned into a Graph."""
