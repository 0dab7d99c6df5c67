"""Rich Console factory and theme for pharmacy output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PHARMACY_THEME = Theme(
    {
        "rx.ok": "bold green",
        "rx.error": "bold red",
        "rx.warning": "bold yellow",
        "rx.op": "bold cyan",
        "rx.key": "dim",
        "rx.name": "bold",
        "rx.category": "bold blue",
        "rx.expired": "red",
        "rx.benefit.low": "yellow",
        "rx.benefit.high": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=PHARMACY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_benefit(benefit: int) -> str:
    """Return the Rich style name for a benefit value."""
    if benefit <= 10:
        return "rx.benefit.low"
    if benefit >= 40:
        return "rx.benefit.high"
    return ""
