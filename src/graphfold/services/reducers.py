"""Built-in reducers available from the CLI by name.

Node ops receive ``(input_values, node)``; entries of *input_values*
are None for edges not yet visited (cycles only) and are skipped.

- ``count``  - ``1 + sum(inputs)``: nested-container counting.
- ``sum``    - sum of inputs; a node without inputs contributes its
  ``value`` attribute (0 when absent).
- ``concat`` - joined string inputs followed by the node id.
- ``expr``   - expression trees: a ``value`` of ``+ - * /`` folds the
  inputs left to right, any other ``value`` is a literal.

Edge ops receive ``(source_value, edge)``:

- ``pass``   - the source value unchanged.
- ``weight`` - the source value times an edge attribute (default ``count``).
"""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable
from typing import Any

from graphfold.domain.reduce import EdgeReducer, NodeReducer, pass_through

_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _present(inputs: list[Any]) -> list[Any]:
    return [v for v in inputs if v is not None]


def count_node(inputs: list[Any], node: Any) -> Any:
    return 1 + sum(_present(inputs))


def sum_node(inputs: list[Any], node: Any) -> Any:
    values = _present(inputs)
    if values:
        return sum(values)
    return getattr(node, "value", 0)


def concat_node(inputs: list[Any], node: Any) -> str:
    return "".join(str(v) for v in _present(inputs)) + str(node.id)


def expr_node(inputs: list[Any], node: Any) -> Any:
    value = getattr(node, "value", None)
    op = _OPERATORS.get(value) if isinstance(value, str) else None
    if op is None:
        return value
    operands = _present(inputs)
    if not operands:
        msg = f"Operator node {node.id!r} ({value}) has no operands"
        raise ValueError(msg)
    return functools.reduce(op, operands)


NODE_OPS: dict[str, NodeReducer[Any]] = {
    "count": count_node,
    "sum": sum_node,
    "concat": concat_node,
    "expr": expr_node,
}

# Returned by reduce for an empty graph.
NODE_OP_INITIALS: dict[str, Any] = {
    "count": 0,
    "sum": 0,
    "concat": "",
    "expr": None,
}

EDGE_OPS: tuple[str, ...] = ("pass", "weight")


def weighted(attr: str) -> EdgeReducer[Any]:
    """Edge op multiplying the source value by ``edge.<attr>`` (1 when absent)."""

    def edge_fn(source_value: Any, edge: Any) -> Any:
        return source_value * getattr(edge, attr, 1)

    return edge_fn


def resolve_edge_op(name: str, *, weight_attr: str = "count") -> EdgeReducer[Any] | None:
    """Return the edge op named *name*, or None when unknown."""
    if name == "pass":
        return pass_through
    if name == "weight":
        return weighted(weight_attr)
    return None
