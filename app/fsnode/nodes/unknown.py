"""Placeholder node for paths with nothing usable behind them."""

from datetime import datetime

from fsnode.exceptions import FilesystemNodeNotFoundError
from fsnode.nodes.base import FilesystemNode
from fsnode.nodes.models import NodeKind


class UnknownNode(FilesystemNode):
    """Node for a path that is neither a directory nor a regular file.

    Returned when resolving a child that does not exist. The node is never
    reclassified: callers must resolve the path again once the filesystem
    has changed.
    """

    @property
    def kind(self) -> NodeKind:
        return NodeKind.UNKNOWN

    def exists(self) -> bool:
        return False

    def modified_at(self) -> datetime:
        raise FilesystemNodeNotFoundError(self.path)

    def read_contents(self) -> bytes:
        raise FilesystemNodeNotFoundError(self.path)

    def write_contents(self, data: bytes) -> None:
        raise FilesystemNodeNotFoundError(self.path)

    def delete(self) -> None:
        raise FilesystemNodeNotFoundError(self.path)
