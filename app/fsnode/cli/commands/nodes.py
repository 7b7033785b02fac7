"""Node inspection and manipulation commands.

Provides the ls, info, cat, mkdir and rm commands. Each command resolves
its PATH argument into a node and reports any fsnode error as a
single-line message with exit code 1.
"""

import json
import os
from enum import Enum
from pathlib import PurePath
from typing import Annotated

import typer
from rich.markup import escape

from fsnode.core.config import FsnodeConfig, load_config
from fsnode.exceptions import FsnodeError
from fsnode.nodes import Directory, File, FilesystemNode, UnknownNode, resolve
from fsnode.utils.formatting import (
    console,
    create_node_table,
    format_node_name,
    format_size,
    format_timestamp,
    print_error,
    print_info,
    print_success,
)


class OutputFormat(str, Enum):
    """Output format options for ls."""

    TABLE = "table"
    JSON = "json"


def ls(
    path: Annotated[str, typer.Argument(help="Directory to list.")] = ".",
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Include all descendants."),
    ] = False,
    files_only: Annotated[
        bool,
        typer.Option("--files", help="Only list regular files."),
    ] = False,
    dirs_only: Annotated[
        bool,
        typer.Option("--dirs", help="Only list directories."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List the entries of a directory."""
    if files_only and dirs_only:
        print_error("--files and --dirs are mutually exclusive.")
        raise typer.Exit(code=1)

    config = _load_config()
    directory = Directory(path)

    try:
        nodes = directory.recurse_children() if recursive else directory.children()
    except FsnodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if files_only:
        nodes = [n for n in nodes if isinstance(n, File)]
    elif dirs_only:
        nodes = [n for n in nodes if isinstance(n, Directory)]

    if not config.show_hidden:
        nodes = [n for n in nodes if not _is_hidden(n, directory)]

    if output_format == OutputFormat.JSON:
        _print_json(nodes)
        return

    if not nodes:
        print_info(f"{directory.path} is empty.")
        return

    table = create_node_table(escape(directory.path))
    for node in nodes:
        table.add_row(
            format_node_name(node, _relative(node, directory)),
            node.kind.value,
            format_size(_size_of(node)),
            _modified_of(node, config),
        )
    console.print(table)


def info(
    path: Annotated[str, typer.Argument(help="Path to inspect.")],
) -> None:
    """Show kind, size and modification time of a path."""
    config = _load_config()
    node = resolve(path)

    console.print(f"[header]Path:[/]     {escape(node.path)}")
    console.print(f"[header]Name:[/]     {escape(node.name) or '-'}")
    console.print(f"[header]Kind:[/]     {node.kind.value}")
    console.print(f"[header]Exists:[/]   {'yes' if node.exists() else 'no'}")
    if isinstance(node, Directory):
        console.print(f"[header]Root:[/]     {'yes' if node.is_root() else 'no'}")
    if isinstance(node, File):
        console.print(f"[header]Size:[/]     {format_size(_size_of(node))}")
    console.print(f"[header]Modified:[/] {_modified_of(node, config)}")


def cat(
    path: Annotated[str, typer.Argument(help="File to print.")],
) -> None:
    """Write the raw contents of a file to stdout."""
    try:
        data = File(path).read_contents()
    except FsnodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    typer.echo(data, nl=False)


def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create.")],
) -> None:
    """Create a directory and any missing parents."""
    directory = Directory(path)
    if directory.exists():
        print_info(f"Directory already exists: {directory.path}")
        return
    try:
        directory.ensure_exists()
    except FsnodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    print_success(f"Created {directory.path}")


def rm(
    path: Annotated[str, typer.Argument(help="File or directory to delete.")],
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Delete directory contents as well."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
) -> None:
    """Delete a file or directory."""
    config = _load_config()
    node = resolve(path)

    if isinstance(node, UnknownNode):
        print_error(f"Nothing to delete at {node.path}")
        raise typer.Exit(code=1)

    if isinstance(node, Directory) and node.is_root():
        print_error(f"Refusing to delete root directory: {node.path}")
        raise typer.Exit(code=1)

    if dry_run:
        try:
            entry_count = len(node.recurse_children()) if isinstance(node, Directory) else 0
        except FsnodeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from None
        suffix = f" ({entry_count} entries inside)" if entry_count else ""
        print_info(f"Would delete {node.kind.value} {node.path}{suffix}")
        return

    if not yes and config.confirm_delete:
        confirmed = typer.confirm(f"Delete {node.kind.value} {node.path}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        if isinstance(node, Directory):
            node.delete(recursive=recursive)
        else:
            node.delete()
    except FsnodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    print_success(f"Deleted {node.path}")


# === Private helper functions ===


def _load_config() -> FsnodeConfig:
    """Load the user config, exiting on a broken file."""
    try:
        return load_config()
    except FsnodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def _relative(node: FilesystemNode, root: Directory) -> str:
    """Label a node by its path below the listed directory."""
    return os.path.relpath(node.path, root.path)


def _is_hidden(node: FilesystemNode, root: Directory) -> bool:
    """Check if any component below the listed directory is a dot-entry."""
    return any(part.startswith(".") for part in PurePath(_relative(node, root)).parts)


def _size_of(node: FilesystemNode) -> int | None:
    """Get the size of a file node, None for anything else or on error."""
    if not isinstance(node, File):
        return None
    try:
        return node.size()
    except (FsnodeError, OSError):
        return None


def _modified_of(node: FilesystemNode, config: FsnodeConfig) -> str:
    """Format the modification time, or "-" if the entry is gone."""
    try:
        return format_timestamp(node.modified_at(), config.timestamp_format)
    except FsnodeError:
        return "-"


def _print_json(nodes: list[FilesystemNode]) -> None:
    """Display nodes as JSON."""
    data = [
        {
            "path": n.path,
            "name": n.name,
            "kind": n.kind.value,
            "size_bytes": _size_of(n),
        }
        for n in nodes
    ]
    console.print_json(json.dumps(data))
