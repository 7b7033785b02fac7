"""fsnode - object-oriented wrappers over files and directories."""

from fsnode.nodes import Directory, File, FilesystemNode, NodeKind, UnknownNode, resolve

__version__ = "0.1.0"

__all__ = [
    "Directory",
    "File",
    "FilesystemNode",
    "NodeKind",
    "UnknownNode",
    "__version__",
    "resolve",
]
