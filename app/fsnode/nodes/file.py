"""Regular file node."""

from __future__ import annotations

import logging
import os
import shutil
from typing import TYPE_CHECKING

from fsnode.exceptions import (
    FileError,
    RegularFileNotFoundError,
    UnreadableFileError,
    UnwritableFileError,
)
from fsnode.nodes.base import FilesystemNode
from fsnode.nodes.models import NodeKind

if TYPE_CHECKING:
    from fsnode.nodes.directory import Directory

logger = logging.getLogger(__name__)


class File(FilesystemNode):
    """Node representing a single regular file.

    Example:
        >>> notes = File("/tmp/notes.txt")
        >>> notes.write_contents(b"hello")
        >>> notes.read_contents()
        b'hello'
        >>> notes.delete()
    """

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE

    @property
    def extension(self) -> str:
        """Return the file suffix without the leading dot, or "" if none."""
        _, ext = os.path.splitext(self.name)
        return ext[1:]

    def exists(self) -> bool:
        """Check if a regular file exists at the path.

        A directory at the same path does not count.
        """
        return os.path.isfile(self.path)

    def read_contents(self) -> bytes:
        """Read the whole file in binary mode.

        Returns:
            File contents.

        Raises:
            UnreadableFileError: If the file cannot be opened or read.
        """
        try:
            with open(self.path, "rb") as f:
                return f.read()
        except OSError as e:
            raise UnreadableFileError(self.path) from e

    def write_contents(self, data: bytes) -> None:
        """Write data to the file, creating or truncating it.

        Args:
            data: Bytes to write.

        Raises:
            UnwritableFileError: If the file cannot be opened or written.
        """
        try:
            with open(self.path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise UnwritableFileError(self.path) from e
        logger.debug("Wrote %d bytes to %s", len(data), self.path)

    def size(self) -> int:
        """Get the file size in bytes.

        Raises:
            RegularFileNotFoundError: If the file does not exist.
        """
        if not self.exists():
            raise RegularFileNotFoundError(self.path)
        try:
            return os.stat(self.path).st_size
        except FileNotFoundError as e:
            raise RegularFileNotFoundError(self.path) from e

    def parent(self) -> Directory:
        """Return the directory containing this file (string-level)."""
        from fsnode.nodes.directory import Directory

        return Directory(self.path).parent()

    def delete(self) -> None:
        """Remove the file. A symlink is removed, not its target.

        Raises:
            RegularFileNotFoundError: If the file does not exist.
            FileError: If the OS refuses the removal.
        """
        if not self.exists():
            raise RegularFileNotFoundError(self.path)
        try:
            os.remove(self.path)
        except FileNotFoundError as e:
            raise RegularFileNotFoundError(self.path) from e
        except OSError as e:
            raise FileError(f"Unable to delete file at {self.path}: {e}", self.path) from e
        logger.debug("Deleted file %s", self.path)

    def copy_to(self, destination: str) -> File:
        """Copy the file, keeping its metadata.

        Args:
            destination: Target file path, or an existing directory to copy into.

        Returns:
            File node for the copy.

        Raises:
            RegularFileNotFoundError: If this file does not exist.
            FileError: If the copy fails.
        """
        if not self.exists():
            raise RegularFileNotFoundError(self.path)
        try:
            target = shutil.copy2(self.path, destination)
        except OSError as e:
            msg = f"Unable to copy file at {self.path} to {destination}: {e}"
            raise FileError(msg, self.path) from e
        logger.debug("Copied file %s to %s", self.path, target)
        return File(str(target))

    def move_to(self, destination: str) -> File:
        """Move the file.

        Args:
            destination: Target file path, or an existing directory to move into.

        Returns:
            File node at the new location.

        Raises:
            RegularFileNotFoundError: If this file does not exist.
            FileError: If the move fails.
        """
        if not self.exists():
            raise RegularFileNotFoundError(self.path)
        try:
            target = shutil.move(self.path, destination)
        except OSError as e:
            msg = f"Unable to move file at {self.path} to {destination}: {e}"
            raise FileError(msg, self.path) from e
        logger.debug("Moved file %s to %s", self.path, target)
        return File(str(target))
