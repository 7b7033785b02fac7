"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from fsnode import __version__
from fsnode.cli.commands import config, nodes

# Create main Typer app
app = typer.Typer(
    name="fsnode",
    help="Inspect and manipulate files and directories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fsnode version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """fsnode - inspect and manipulate files and directories."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )


# Register commands
app.command("ls")(nodes.ls)
app.command("info")(nodes.info)
app.command("cat")(nodes.cat)
app.command("mkdir")(nodes.mkdir)
app.command("rm")(nodes.rm)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
