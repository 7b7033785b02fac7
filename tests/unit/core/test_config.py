"""Unit tests for FsnodeConfig and its TOML I/O."""

from pathlib import Path

import pytest
from fsnode.core.config import (
    ConfigError,
    ConfigParseError,
    FsnodeConfig,
    load_config,
    save_config,
)
from pydantic import ValidationError


class TestFsnodeConfig:
    """Tests for FsnodeConfig Pydantic model."""

    def test_default_values(self) -> None:
        """FsnodeConfig has correct default values."""
        config = FsnodeConfig()

        assert config.show_hidden is True
        assert config.confirm_delete is True
        assert config.timestamp_format == "%Y-%m-%d %H:%M"

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            FsnodeConfig(colour="red")  # type: ignore[call-arg]

    def test_empty_timestamp_format_rejected(self) -> None:
        """An empty timestamp format is invalid."""
        with pytest.raises(ValidationError):
            FsnodeConfig(timestamp_format="")


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing config file yields the defaults."""
        assert load_config(tmp_path / "config.toml") == FsnodeConfig()

    def test_load_values(self, tmp_path: Path) -> None:
        """Values from the file override defaults."""
        path = tmp_path / "config.toml"
        path.write_text('show_hidden = false\ntimestamp_format = "%H:%M"\n')

        config = load_config(path)

        assert config.show_hidden is False
        assert config.confirm_delete is True
        assert config.timestamp_format == "%H:%M"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("show_hidden = \n")

        with pytest.raises(ConfigParseError, match="Invalid TOML syntax"):
            load_config(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        """Content that doesn't match the schema raises ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('confirm_delete = "sometimes"\n')

        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)

    def test_uses_default_path(self, config_home: Path) -> None:
        """Without a path, the XDG config file is read."""
        config_file = config_home / "fsnode" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("confirm_delete = false\n")

        assert load_config().confirm_delete is False


class TestSaveConfig:
    """Tests for save_config function."""

    def test_save_and_load(self, tmp_path: Path) -> None:
        """A saved config loads back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        config = FsnodeConfig(show_hidden=False, timestamp_format="%d.%m.%Y")

        written = save_config(config, path)

        assert written == path
        assert path.is_file()
        assert load_config(path) == config

    def test_save_default_path(self, config_home: Path) -> None:
        """Without a path, the XDG config file is written."""
        written = save_config(FsnodeConfig())

        assert written == config_home / "fsnode" / "config.toml"
        assert written.is_file()
