"""Shared console helpers for Game Grove.

All user-facing output (progress, warnings, listings) goes through the single
Rich ``console`` defined here so tests can capture or silence it in one place.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gamegrove.models import FolderEntry

console = Console()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_timestamp(seconds: int) -> str:
    """Format an epoch timestamp for listings.

    ``0`` means "unknown" and renders as ``-``.

    Examples::

        format_timestamp(0)           -> "-"
        format_timestamp(1700000000)  -> "2023-11-14 22:13"
    """
    if seconds <= 0:
        return "-"
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: Mapping[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_folder_table(entries: Iterable[FolderEntry], title: str) -> None:
    """Print a folder listing as a three-column table."""
    table = Table(title=escape(title), show_header=True, header_style="bold cyan")
    table.add_column("Name", style="bold")
    table.add_column("Modified (UTC)", no_wrap=True)
    table.add_column("Path", style="dim")

    rows = 0
    for entry in entries:
        table.add_row(
            escape(entry.name), format_timestamp(entry.last_modified), escape(entry.path)
        )
        rows += 1

    if rows == 0:
        console.print(f"[dim]{escape(title)}: no folders found[/dim]")
        return
    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
