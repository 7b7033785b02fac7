"""Node kind definitions."""

from enum import Enum


class NodeKind(str, Enum):
    """Kind of a filesystem node, fixed when the node is classified.

    Attributes:
        DIRECTORY: Directory (or symlink resolving to one).
        FILE: Regular file (or symlink resolving to one).
        UNKNOWN: Nothing usable at the path: missing, dangling symlink,
            or a special file such as a FIFO.
    """

    DIRECTORY = "directory"
    FILE = "file"
    UNKNOWN = "unknown"
