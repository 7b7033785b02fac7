"""Unit tests for the exception hierarchy."""

import pytest
from fsnode.exceptions import (
    DirectoryCouldNotBeScannedError,
    DirectoryError,
    DirectoryNotEmptyError,
    DirectoryNotFoundError,
    FileError,
    FilesystemNodeNotFoundError,
    FsnodeError,
    InvalidParentLevelError,
    RegularFileNotFoundError,
    UnreadableFileError,
    UnwritableFileError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance and messages."""

    @pytest.mark.parametrize(
        ("exc_class", "base"),
        [
            (DirectoryNotFoundError, FilesystemNodeNotFoundError),
            (RegularFileNotFoundError, FilesystemNodeNotFoundError),
            (DirectoryNotEmptyError, DirectoryError),
            (DirectoryCouldNotBeScannedError, DirectoryError),
            (UnreadableFileError, FileError),
            (UnwritableFileError, FileError),
            (FileError, FsnodeError),
            (DirectoryError, FsnodeError),
            (FilesystemNodeNotFoundError, FsnodeError),
        ],
    )
    def test_inheritance(self, exc_class: type, base: type) -> None:
        """Each error sits under its family base."""
        assert issubclass(exc_class, base)

    def test_not_found_message_and_path(self) -> None:
        """Not-found errors carry the path."""
        error = FilesystemNodeNotFoundError("/x/y")

        assert str(error) == "Filesystem node at /x/y not found"
        assert error.path == "/x/y"

    def test_directory_messages(self) -> None:
        """Directory errors mention the directory."""
        assert str(DirectoryNotFoundError("/d")) == "Directory at /d not found"
        assert str(DirectoryNotEmptyError("/d")) == "Directory at /d is not empty"

    def test_unreadable_message(self) -> None:
        """UnreadableFileError mentions the file."""
        assert str(UnreadableFileError("/f")) == "Unable to read file at /f"

    def test_invalid_parent_level_is_value_error(self) -> None:
        """InvalidParentLevelError can be caught as ValueError."""
        error = InvalidParentLevelError(0)

        assert isinstance(error, ValueError)
        assert error.levels == 0
        assert "0" in str(error)
