"""Shared utility functions for el-scaffold.

Provides whole-file text I/O, path-string helpers, and Rich-based console
reporting.  All reads and writes are whole-file: the scaffolder never streams
or partially rewrites a file.
"""

from __future__ import annotations

import posixpath
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Path-string helpers
# ---------------------------------------------------------------------------


def to_posix(path: str | Path) -> str:
    """Return *path* with every backslash turned into a forward slash."""
    return str(path).replace("\\", "/")


def as_dir(path: str) -> str:
    """Normalize a directory string and make sure it ends with ``/``.

    Examples::

        as_dir("app")          -> "app/"
        as_dir("./app//sub/")  -> "app/sub/"
    """
    normalized = posixpath.normpath(to_posix(path))
    if normalized == ".":
        return "./"
    return normalized.rstrip("/") + "/"


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_text(path: str | Path) -> str:
    """Read a whole UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    return Path(path).read_text(encoding="utf-8")


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first.

    Returns:
        The written ``Path``.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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


def print_action(action: str, path: str | Path) -> None:
    """Print a yeoman-style ``create``/``update`` line for a written file."""
    color = "green" if action == "create" else "cyan"
    console.print(f"   [bold {color}]{action:>6}[/bold {color}] {path}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
