"""Filesystem node types.

This module provides the node hierarchy (directories, regular files and
unknown placeholders) and the classification helper that picks the right
node type for a path.
"""

from fsnode.nodes.base import FilesystemNode
from fsnode.nodes.directory import Directory, resolve
from fsnode.nodes.file import File
from fsnode.nodes.models import NodeKind
from fsnode.nodes.unknown import UnknownNode

__all__ = [
    "Directory",
    "File",
    "FilesystemNode",
    "NodeKind",
    "UnknownNode",
    "resolve",
]
