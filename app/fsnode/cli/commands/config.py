"""Config commands.

Provides `fsnode config show` and `fsnode config init`.
"""

from typing import Annotated

import typer
from rich.markup import escape

from fsnode.core.config import FsnodeConfig, load_config, save_config
from fsnode.core.paths import get_config_path
from fsnode.exceptions import FsnodeError
from fsnode.nodes import File
from fsnode.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the fsnode configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration."""
    try:
        config = load_config()
    except FsnodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    console.print(f"[muted]{escape(str(get_config_path()))}[/]")
    console.print_json(config.model_dump_json())


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if File(str(config_path)).exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        return

    try:
        written = save_config(FsnodeConfig(), config_path)
    except FsnodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    print_success(f"Wrote default config to {written}")
