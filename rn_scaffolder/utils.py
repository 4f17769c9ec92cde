"""Shared utility functions for rn-scaffolder.

Provides the shared Rich console, coloured status helpers, the configuration
summary table, and pretty-printed JSON output.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON (2-space indent, trailing newline).

    Parent directories are created automatically.  The write itself is
    performed in a thread-pool executor to avoid blocking the event loop.

    Args:
        data: Serialisable data (dict or list).
        path: Destination file path.  Existing files are overwritten.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str) -> None:
    """Print the start-of-run banner."""
    console.print(Panel.fit(f"[bold magenta]{title}[/bold magenta]", border_style="magenta"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_created(kind: str, rel_path: str, color: str = "green") -> None:
    """Print one ``Created <kind>: <path>`` progress line."""
    console.print(f"[{color}]Created {kind}: {escape(rel_path)}[/{color}]")
