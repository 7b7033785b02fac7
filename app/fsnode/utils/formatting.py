"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from fsnode.nodes import FilesystemNode, NodeKind

_THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
                "error": "bold #f53263",
        "info": "#0ec1c8",
        "kind.directory": "bold #0e8ac8",
        "kind.file": "#ffffff",
        "kind.unknown": "#d44ebc",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=_THEME, color_system=_detect_color_system())
err_console = Console(theme=_THEME, stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int | None) -> str:
    """Format a byte count as a human-readable string.

    Args:
        size_bytes: Size in bytes, or None if unknown.

    Returns:
        String like "512 B", "4.0 KB" or "-" for unknown sizes.
    """
    if size_bytes is None:
        return "-"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{int(size)} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def format_timestamp(value: datetime, fmt: str) -> str:
    """Format a modification time in local time."""
    return value.astimezone().strftime(fmt)


def create_node_table(title: str) -> Table:
    """Create a pre-configured table for displaying nodes.

    Args:
        title: Table title.

    Returns:
        Rich Table with name, kind, size and modified columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Kind", width=10)
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="muted")
    return table


def format_node_name(node: FilesystemNode, label: str) -> str:
    """Style a node label according to its kind.

    Directories get a trailing separator so they stand out in listings.
    """
    if node.kind == NodeKind.DIRECTORY:
        return f"[kind.directory]{escape(label)}/[/]"
    return f"[kind.{node.kind.value}]{escape(label)}[/]"


def print_info(message: str) -> None:
    """Print an info message. The message is printed literally, not as markup."""
    console.print(f"[info]{escape(message)}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
