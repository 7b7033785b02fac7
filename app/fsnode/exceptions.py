"""Exception taxonomy for filesystem node operations.

Every exception carries the path it concerns in its ``path`` attribute.
Underlying OS errors are chained, never swallowed.
"""


class FsnodeError(Exception):
    """Base exception for all fsnode errors."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class FilesystemNodeNotFoundError(FsnodeError):
    """Raised when no filesystem entry exists at a path."""

    def __init__(self, path: str, message: str | None = None) -> None:
        super().__init__(message or f"Filesystem node at {path} not found", path)


class DirectoryNotFoundError(FilesystemNodeNotFoundError):
    """Raised when a directory is required but absent."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Directory at {path} not found")


class RegularFileNotFoundError(FilesystemNodeNotFoundError):
    """Raised when a regular file is required but absent."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"File at {path} not found")


class InvalidParentLevelError(FsnodeError, ValueError):
    """Raised when a parent lookup is asked for a non-positive level."""

    def __init__(self, levels: int) -> None:
        super().__init__(f"Invalid parent level {levels}, must be 1 or greater")
        self.levels = levels


class DirectoryError(FsnodeError):
    """Base exception for directory-level failures."""


class DirectoryNotEmptyError(DirectoryError):
    """Raised when a non-recursive delete hits a non-empty directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory at {path} is not empty", path)


class DirectoryCouldNotBeScannedError(DirectoryError):
    """Raised when listing an existing directory fails."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory at {path} could not be scanned", path)


class DirectoryCouldNotBeCreatedError(DirectoryError):
    """Raised when a directory cannot be created."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory at {path} could not be created", path)


class DirectoryCouldNotBeDeletedError(DirectoryError):
    """Raised when an existing directory cannot be removed."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory at {path} could not be deleted", path)


class FileError(FsnodeError):
    """Raised for file-level OS failures."""


class UnreadableFileError(FileError):
    """Raised when a file cannot be opened or read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Unable to read file at {path}", path)


class UnwritableFileError(FileError):
    """Raised when a file cannot be opened for writing."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Unable to write file at {path}", path)
