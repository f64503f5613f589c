"""Rich Console factory and theme for graphfold output.

Consoles render into a StringIO buffer so every formatter keeps the
``format_result() -> str`` contract. Rich drops color codes on its own
when there is no terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRAPHFOLD_THEME = Theme(
    {
        "gf.ok": "bold green",
        "gf.error": "bold red",
        "gf.warning": "bold yellow",
        "gf.op": "bold cyan",
        "gf.key": "dim",
        "gf.id": "bold blue",
        "gf.edge": "magenta",
        "gf.value": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=GRAPHFOLD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
