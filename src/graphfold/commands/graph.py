"""Standalone commands: traversal, slicing, reversal, reduction, summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphfold.commands._base import GfCommand
from graphfold.services.graph import GraphService
from graphfold.services.reducers import EDGE_OPS, NODE_OPS

if TYPE_CHECKING:
    from graphfold.commands._context import AppContext

_GRAPH_FILE = click.argument("graph_file", type=click.Path(dir_okay=False))


@click.command(
    cls=GfCommand,
    examples="""\
  graphfold info graph.yaml
  graphfold --json info graph.json""",
)
@_GRAPH_FILE
@click.pass_obj
def info(app: AppContext, graph_file: str) -> None:
    """Summarize a graph: counts, sources, sinks, acyclicity."""
    graph = app.load_graph("info", graph_file)
    app.emit(GraphService(graph, app.settings).info())


@click.command(
    cls=GfCommand,
    examples="""\
  graphfold topo bags.yaml
  graphfold -q topo bags.yaml | head -1""",
)
@_GRAPH_FILE
@click.pass_obj
def topo(app: AppContext, graph_file: str) -> None:
    """Print nodes in strict topological order (fails on cycles)."""
    graph = app.load_graph("topo", graph_file)
    app.emit(GraphService(graph, app.settings).topo())


@click.command(
    cls=GfCommand,
    examples="""\
  graphfold walk ring.yaml
  graphfold walk ring.yaml --from 2
  graphfold -v walk --from "shiny gold" bags.yaml""",
)
@_GRAPH_FILE
@click.option("--from", "start", default=None, help="Anchor the walk at this node.")
@click.pass_obj
def walk(app: AppContext, graph_file: str, start: str | None) -> None:
    """Visit every node and edge, tolerating cycles."""
    graph = app.load_graph("walk", graph_file)
    app.emit(GraphService(graph, app.settings).walk(app.node_ref(graph, start)))


@click.command(
    "slice",
    cls=GfCommand,
    examples="""\
  graphfold slice bags.yaml "shiny gold"
  graphfold -q slice bags.yaml "shiny gold" > gold.json""",
)
@_GRAPH_FILE
@click.argument("start")
@click.pass_obj
def slice_cmd(app: AppContext, graph_file: str, start: str) -> None:
    """Extract the subgraph reachable from START."""
    graph = app.load_graph("slice", graph_file)
    app.emit(GraphService(graph, app.settings).slice(app.node_ref(graph, start)))


@click.command(
    cls=GfCommand,
    examples="""\
  graphfold reverse deps.yaml
  graphfold -q reverse deps.yaml > reversed.json""",
)
@_GRAPH_FILE
@click.pass_obj
def reverse(app: AppContext, graph_file: str) -> None:
    """Flip the direction of every edge."""
    graph = app.load_graph("reverse", graph_file)
    app.emit(GraphService(graph, app.settings).reverse())


@click.command(
    cls=GfCommand,
    examples="""\
  graphfold reduce math.yaml --node-op expr --reverse
  graphfold reduce bags.yaml --from "shiny gold" --edge-op weight --reverse
  graphfold -q reduce ring.yaml --node-op concat""",
)
@_GRAPH_FILE
@click.option(
    "--node-op",
    type=click.Choice(sorted(NODE_OPS)),
    default=None,
    help="Node reducer (default from [reduce] config).",
)
@click.option(
    "--edge-op",
    type=click.Choice(list(EDGE_OPS)),
    default=None,
    help="Edge reducer (default from [reduce] config).",
)
@click.option("--weight-attr", default=None, help="Edge attribute used by --edge-op weight.")
@click.option("--reverse", "reverse_edges", is_flag=True, help="Reduce the reversed graph.")
@click.option("--from", "start", default=None, help="Slice from this node first.")
@click.pass_obj
def reduce(
    app: AppContext,
    graph_file: str,
    node_op: str | None,
    edge_op: str | None,
    weight_attr: str | None,
    reverse_edges: bool,
    start: str | None,
) -> None:
    """Fold the graph into one value with a built-in reducer."""
    graph = app.load_graph("reduce", graph_file)
    app.emit(
        GraphService(graph, app.settings).reduce(
            node_op=node_op,
            edge_op=edge_op,
            weight_attr=weight_attr,
            reverse=reverse_edges,
            start=app.node_ref(graph, start),
        )
    )
