"""AppContext - shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup, graph-file loading, and result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click
import structlog

from graphfold.domain.errors import GraphDocumentError
from graphfold.output.formatters import OutputSettings, format_result
from graphfold.services.result import ServiceResult

if TYPE_CHECKING:
    from graphfold.config.settings import GraphfoldSettings
    from graphfold.domain.graph import Graph, NodeRef

log = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GraphfoldSettings) -> None:
        self.settings = settings

        from graphfold.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def load_graph(self, op: str, path: str) -> Graph:
        """Load the graph document at *path*, or emit INVALID_DOCUMENT and exit."""
        from graphfold.infrastructure.loader import load_graph

        try:
            graph = load_graph(Path(path))
        except GraphDocumentError as exc:
            self.fail(ServiceResult.failure(op, "INVALID_DOCUMENT", str(exc), path=path))
        log.debug("graph.loaded", path=path, nodes=len(graph.nodes), edges=len(graph.edges))
        return graph

    @staticmethod
    def node_ref(graph: Graph, raw: str | None) -> NodeRef | None:
        """Coerce a command-line node id onto the graph's id type."""
        if raw is None:
            return None
        from graphfold.services.base import coerce_node_id

        return coerce_node_id(graph, raw)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they stay
          out of piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)
        click.echo(format_result(result, settings=self._output_settings()))
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
