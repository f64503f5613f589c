"""Standalone command: render a graph as SVG, DOT, or JSON."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphfold.commands._base import GfCommand
from graphfold.services.export import EXPORT_FORMATS, ExportService
from graphfold.services.result import ServiceResult

if TYPE_CHECKING:
    from graphfold.commands._context import AppContext


@click.command(
    cls=GfCommand,
    examples="""\
  graphfold export bags.yaml
  graphfold export bags.yaml --format svg -o bags.svg
  graphfold export deps.json --format dot | dot -Tpng -o deps.png""",
)
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(list(EXPORT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (default from [export] config).",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file (omit to print to stdout).",
)
@click.pass_obj
def export(app: AppContext, graph_file: str, fmt: str | None, output_file: str | None) -> None:
    """Render a graph as SVG, Graphviz DOT, or D3 JSON."""
    graph = app.load_graph("export_graph", graph_file)
    result = ExportService(graph, app.settings).export_graph(fmt=fmt.lower() if fmt else None)

    if not result.ok or (app.settings.json_output and not output_file):
        app.emit(result)
        return

    if output_file:
        Path(output_file).write_text(result.data["content"], encoding="utf-8")
        app.emit(
            ServiceResult(
                ok=True,
                op="export_graph",
                data={
                    "format": result.data["format"],
                    "output_file": output_file,
                    "node_count": result.data["node_count"],
                    "edge_count": result.data["edge_count"],
                },
            )
        )
    else:
        click.echo(result.data["content"], nl=False)
