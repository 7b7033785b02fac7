"""Abstract base class for filesystem nodes.

This module defines the FilesystemNode interface shared by files,
directories and unknown nodes. A node is identified by its path string
alone and holds no open handles; every query goes back to the filesystem.
"""

import os
from abc import ABC, abstractmethod
from datetime import UTC, datetime

from fsnode.core.path import basename
from fsnode.exceptions import FilesystemNodeNotFoundError
from fsnode.nodes.models import NodeKind


class FilesystemNode(ABC):
    """Abstract base class for all filesystem nodes.

    Attributes:
        path: Path string exactly as given at construction.

    Example:
        >>> node = Directory("/tmp/project")
        >>> node.name
        'project'
        >>> node.exists()
        False
    """

    def __init__(self, path: str) -> None:
        """Initialize the node.

        Args:
            path: Path to the node. Stored verbatim, trailing separators included.
        """
        self._path = path

    @property
    def path(self) -> str:
        """Return the path exactly as constructed."""
        return self._path

    @property
    def name(self) -> str:
        """Return the final path component."""
        return basename(self._path)

    @property
    @abstractmethod
    def kind(self) -> NodeKind:
        """Return the kind this node was classified as."""

    @abstractmethod
    def exists(self) -> bool:
        """Check if an entry of this node's kind currently exists.

        Returns:
            True if the entry exists with the expected kind, False otherwise.
        """

    def modified_at(self) -> datetime:
        """Get the last modification time of the entry.

        Returns:
            Timezone-aware modification time in UTC.

        Raises:
            FilesystemNodeNotFoundError: If the entry does not exist.
        """
        if not self.exists():
            raise FilesystemNodeNotFoundError(self._path)
        try:
            mtime = os.stat(self._path).st_mtime
        except FileNotFoundError as e:
            raise FilesystemNodeNotFoundError(self._path) from e
        return datetime.fromtimestamp(mtime, tz=UTC)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilesystemNode):
            return NotImplemented
        return type(self) is type(other) and self._path == other._path

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._path))
