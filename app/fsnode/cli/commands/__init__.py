"""CLI commands for fsnode.

This package contains all subcommand implementations.
"""

from fsnode.cli.commands import config, nodes

__all__ = ["config", "nodes"]
