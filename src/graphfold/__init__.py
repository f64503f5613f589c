"""graphfold - directed graph traversal and fold/reduce evaluation."""

from __future__ import annotations

from graphfold.domain.errors import AmbiguousOutputError, CycleDetectedError, GraphError
from graphfold.domain.graph import Graph
from graphfold.domain.models import Edge, Node
from graphfold.domain.types import Visit, VisitKind

__version__ = "0.1.0"

__all__ = [
    "AmbiguousOutputError",
    "CycleDetectedError",
    "Edge",
    "Graph",
    "GraphError",
    "Node",
    "Visit",
    "VisitKind",
    "__version__",
]
