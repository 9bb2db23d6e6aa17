"""Rich Console factory and theme for pulsarctl output.

Consoles render into a StringIO buffer so renderers keep a
``render -> str`` contract.  In non-TTY environments (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PULSARCTL_THEME = Theme(
    {
        "pulsarctl.error": "bold red",
        "pulsarctl.warning": "bold yellow",
        "pulsarctl.key": "dim",
        "pulsarctl.namespace": "bold blue",
        "pulsarctl.value": "bold",
        "pulsarctl.unset": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Soft wrap is on: confirmation lines are a stable contract and must
    never be broken at the terminal width.
    """
    return Console(
        file=StringIO(),
        theme=PULSARCTL_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
