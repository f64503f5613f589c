"""Subcommand modules for graphfold.

Provides register_commands(), which imports command modules lazily so
``graphfold --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from graphfold.commands.export import export
    from graphfold.commands.graph import info, reduce, reverse, slice_cmd, topo, walk

    cli.add_command(info)
    cli.add_command(topo)
    cli.add_command(walk)
    cli.add_command(slice_cmd)
    cli.add_command(reverse)
    cli.add_command(reduce)
    cli.add_command(export)
