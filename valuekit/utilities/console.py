"""
Console output utilities.

Formatted status lines and tables for the CLI, rendered with rich.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console(highlight=False)

EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_INFO = "ℹ️"


def print_success(message: str) -> None:
    """Print success message with emoji."""
    console.print(Text(f"{EMOJI_SUCCESS} {message}", style="green"))


def print_error(message: str) -> None:
    """Print error message with emoji."""
    console.print(Text(f"{EMOJI_ERROR} {message}", style="bold red"))


def print_info(message: str) -> None:
    """Print info message with emoji."""
    console.print(Text(f"{EMOJI_INFO} {message}", style="cyan"))


def print_table(title: str, columns: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
    """Print rows as a table, the last column taking the remaining width."""
    table = Table(title=title, header_style="bold", padding=(0, 1))
    for index, column in enumerate(columns):
        last = index == len(columns) - 1
        table.add_column(column, overflow="fold", ratio=1 if last else None, no_wrap=not last)
    for row in rows:
        # Text() keeps generated values from being read as rich markup
        table.add_row(*(Text(cell) for cell in row))
    console.print(table)
