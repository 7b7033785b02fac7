"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

FILE_CONTENTS = b"This is a generated test file. You are free to delete it."


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """An existing, empty directory."""
    path = tmp_path / "empty"
    path.mkdir()
    return path


@pytest.fixture
def non_empty_dir(tmp_path: Path) -> Path:
    """A directory holding one file and one subdirectory with a file.

    Layout::

        nonEmpty/
            testfile
            testfolder/
                testfile2
    """
    path = tmp_path / "nonEmpty"
    path.mkdir()
    (path / "testfile").write_bytes(FILE_CONTENTS)
    (path / "testfolder").mkdir()
    (path / "testfolder" / "testfile2").touch()
    return path


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


@pytest.fixture
def file_contents() -> bytes:
    """Contents written to nonEmpty/testfile."""
    return FILE_CONTENTS
