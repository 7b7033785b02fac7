"""CLI package for fsnode.

This package contains the Typer application and all subcommands.
"""

from fsnode.cli.main import app

__all__ = ["app"]
