"""Output mode dispatch for ServiceResult.

The CLI renders results for humans (Rich tables and key-value fields)
or machines (``--json``). ``--quiet`` trims human output to bare ids
or values so it pipes cleanly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from graphfold.services.result import ServiceResult


class OutputSettings(BaseModel):
    """The three output switches, resolved from the CLI."""

    model_config = ConfigDict(frozen=True)

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output switches. When given, *json_output* is ignored.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)

    if settings.json_output:
        return result.model_dump_json(indent=2)

    from graphfold.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
