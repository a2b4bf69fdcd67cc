"""Shared utility functions for modmake.

Provides Rich-based console reporting and small file-system helpers used by
the scaffolder and the CLI entry point.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_parent_dir(path: str | Path) -> Path:
    """Create the parent directory of *path* (and its parents) if missing.

    Args:
        path: A file path whose containing directory must exist.

    Returns:
        The parent directory as a ``Path``.
    """
    parent = Path(path).parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def read_text_or_empty(path: str | Path) -> str:
    """Return the file's contents, or ``""`` when the file does not exist."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first."""
    target = Path(path)
    ensure_parent_dir(target)
    target.write_text(content, encoding="utf-8")
    return target


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(rows: list[tuple[str, str, str]], title: str = "Summary") -> None:
    """Print a three-column artifact/status/path table.

    Args:
        rows: ``(artifact, status, path)`` tuples.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Artifact", style="dim", no_wrap=True)
    table.add_column("Status")
    table.add_column("Path")

    for artifact, status, path in rows:
        table.add_row(escape(artifact), status, escape(path))

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
