"""Directory node: child resolution, traversal and deletion.

Children are never cached. Every enumeration lists the directory again
and returns a fresh snapshot; repeated iteration over one result does
not touch the filesystem.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from fsnode.core.path import is_root, join, strip_segments
from fsnode.exceptions import (
    DirectoryCouldNotBeCreatedError,
    DirectoryCouldNotBeDeletedError,
    DirectoryCouldNotBeScannedError,
    DirectoryNotEmptyError,
    DirectoryNotFoundError,
    FileError,
    FilesystemNodeNotFoundError,
    InvalidParentLevelError,
    RegularFileNotFoundError,
)
from fsnode.nodes.base import FilesystemNode
from fsnode.nodes.file import File
from fsnode.nodes.models import NodeKind
from fsnode.nodes.unknown import UnknownNode

logger = logging.getLogger(__name__)


def resolve(path: str) -> FilesystemNode:
    """Classify the entry at a path into a concrete node.

    Symlinks are followed, so a link counts as whatever it points to and
    a dangling link resolves to an UnknownNode.

    Args:
        path: Path to classify.

    Returns:
        Directory, File or UnknownNode.
    """
    if os.path.isdir(path):
        return Directory(path)
    if os.path.isfile(path):
        return File(path)
    return UnknownNode(path)


class Directory(FilesystemNode):
    """Node representing a directory.

    Example:
        >>> project = Directory("/tmp/project")
        >>> project.ensure_exists()
        >>> [child.name for child in project.children()]
        []
        >>> project.delete()
    """

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY

    def exists(self) -> bool:
        """Check if a directory exists at the path.

        A regular file at the same path does not count.
        """
        return os.path.isdir(self.path)

    def is_root(self) -> bool:
        """Check if the path is a filesystem or drive root."""
        return is_root(self.path)

    def child(self, name: str, throw_if_not_found: bool = False) -> FilesystemNode:
        """Resolve an entry inside this directory.

        Args:
            name: Entry name (or relative path) below this directory.
            throw_if_not_found: Raise instead of returning an UnknownNode.

        Returns:
            Directory, File or UnknownNode for the joined path.

        Raises:
            FilesystemNodeNotFoundError: If nothing usable exists there and
                throw_if_not_found is set.
        """
        node = resolve(join(self.path, name))
        if throw_if_not_found and isinstance(node, UnknownNode):
            raise FilesystemNodeNotFoundError(node.path)
        return node

    def file(self, name: str) -> File:
        """Resolve a child that must be a regular file.

        Raises:
            RegularFileNotFoundError: If the child is missing or not a file.
        """
        try:
            node = self.child(name, throw_if_not_found=True)
        except FilesystemNodeNotFoundError as e:
            raise RegularFileNotFoundError(e.path or name) from e
        if not isinstance(node, File):
            raise RegularFileNotFoundError(node.path)
        return node

    def directory(self, name: str) -> Directory:
        """Resolve a child that must be a directory.

        Raises:
            DirectoryNotFoundError: If the child is missing or not a directory.
        """
        try:
            node = self.child(name, throw_if_not_found=True)
        except FilesystemNodeNotFoundError as e:
            raise DirectoryNotFoundError(e.path or name) from e
        if not isinstance(node, Directory):
            raise DirectoryNotFoundError(node.path)
        return node

    def children(self, recursive: bool = False) -> list[FilesystemNode]:
        """List the entries of this directory.

        Entries are sorted by name and classified once, at listing time.

        Args:
            recursive: Include all descendants (see recurse_children).

        Returns:
            Snapshot of child nodes.

        Raises:
            DirectoryNotFoundError: If this directory does not exist.
            DirectoryCouldNotBeScannedError: If the listing fails otherwise.
        """
        if recursive:
            return self.recurse_children()
        return [resolve(join(self.path, name)) for name in self._list_names()]

    def recurse_children(self, recursive: bool = True) -> list[FilesystemNode]:
        """List all descendants depth-first.

        Each child comes before its own descendants, and a subdirectory's
        whole subtree comes before the next sibling. Symlinked directories
        are followed; a symlink cycle does not terminate.

        Args:
            recursive: If False, behave like children().

        Returns:
            Snapshot of descendant nodes in traversal order.
        """
        if not recursive:
            return self.children()
        return list(self._walk())

    def _walk(self) -> Iterator[FilesystemNode]:
        for child in self.children():
            yield child
            if isinstance(child, Directory):
                yield from child._walk()

    def files(self) -> list[File]:
        """List the regular files directly inside this directory."""
        return [child for child in self.children() if isinstance(child, File)]

    def directories(self) -> list[Directory]:
        """List the subdirectories directly inside this directory."""
        return [child for child in self.children() if isinstance(child, Directory)]

    def is_empty(self) -> bool:
        """Check if the directory has no entries."""
        return not self._list_names()

    def parent(self, levels: int = 1) -> Directory:
        """Return an ancestor directory by stripping path components.

        The result is computed from the path string and may not exist.
        Going above the root stays at the root.

        Args:
            levels: Number of components to strip.

        Returns:
            Ancestor Directory.

        Raises:
            InvalidParentLevelError: If levels is less than 1.
        """
        if levels < 1:
            raise InvalidParentLevelError(levels)
        return Directory(strip_segments(self.path, levels))

    def ensure_exists(self) -> None:
        """Create the directory and any missing parents. No-op if present.

        Raises:
            DirectoryCouldNotBeCreatedError: If creation fails.
        """
        if self.exists():
            return
        try:
            os.makedirs(self.path, exist_ok=True)
        except OSError as e:
            raise DirectoryCouldNotBeCreatedError(self.path) from e
        logger.debug("Created directory %s", self.path)

    def delete(self, recursive: bool = False) -> None:
        """Remove the directory.

        A recursive delete removes contents depth-first, then the directory.
        Symlinks are unlinked and never entered. The operation is not
        transactional: the first failure is raised immediately and whatever
        was already removed stays removed.

        Args:
            recursive: Remove contents as well.

        Raises:
            DirectoryNotFoundError: If the directory does not exist.
            DirectoryNotEmptyError: If not recursive and the directory has entries.
            DirectoryCouldNotBeDeletedError: If a directory removal fails.
            RegularFileNotFoundError: If a listed entry vanished before its removal.
            FileError: If removing a contained entry fails.
        """
        if not self.exists():
            raise DirectoryNotFoundError(self.path)

        if os.path.islink(self.path):
            _unlink(self.path)
            logger.debug("Removed directory symlink %s", self.path)
            return

        if recursive:
            for child in self.children():
                if isinstance(child, Directory) and not os.path.islink(child.path):
                    child.delete(recursive=True)
                else:
                    _unlink(child.path)
        elif not self.is_empty():
            raise DirectoryNotEmptyError(self.path)

        try:
            os.rmdir(self.path)
        except OSError as e:
            raise DirectoryCouldNotBeDeletedError(self.path) from e
        logger.debug("Deleted directory %s", self.path)

    def _list_names(self) -> list[str]:
        if not self.exists():
            raise DirectoryNotFoundError(self.path)
        try:
            return sorted(os.listdir(self.path))
        except FileNotFoundError as e:
            raise DirectoryNotFoundError(self.path) from e
        except OSError as e:
            raise DirectoryCouldNotBeScannedError(self.path) from e


def _unlink(path: str) -> None:
    """Remove a non-directory entry (file, symlink or special file)."""
    try:
        os.unlink(path)
    except FileNotFoundError as e:
        raise RegularFileNotFoundError(path) from e
    except OSError as e:
        raise FileError(f"Unable to delete file at {path}: {e}", path) from e
