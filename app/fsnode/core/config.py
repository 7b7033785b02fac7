"""CLI configuration and settings.

Configuration is stored in ~/.config/fsnode/config.toml. A missing file
is not an error: the defaults apply.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fsnode.core.paths import get_config_path
from fsnode.exceptions import FsnodeError
from fsnode.nodes import Directory, File

logger = logging.getLogger(__name__)


class FsnodeConfig(BaseModel):
    """Configuration for the fsnode command line.

    Attributes:
        show_hidden: List entries whose name starts with a dot.
        confirm_delete: Ask before deleting unless --yes is given.
        timestamp_format: strftime format for modification times.
    """

    model_config = ConfigDict(extra="forbid")

    show_hidden: Annotated[
        bool,
        Field(description="List dot-entries in ls output"),
    ] = True
    confirm_delete: Annotated[
        bool,
        Field(description="Prompt before rm"),
    ] = True
    timestamp_format: Annotated[
        str,
        Field(min_length=1, description="strftime format for timestamps"),
    ] = "%Y-%m-%d %H:%M"


class ConfigError(FsnodeError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FsnodeConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FsnodeConfig; defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()
    config_file = File(str(config_path))

    if not config_file.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return FsnodeConfig()

    try:
        data = tomllib.loads(config_file.read_contents().decode("utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}", str(config_path)) from e
    except (FsnodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read config: {e}", str(config_path)) from e

    try:
        return FsnodeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}", str(config_path)) from e


def save_config(config: FsnodeConfig, path: Path | None = None) -> Path:
    """Write configuration to a TOML file, creating its directory.

    Args:
        config: Configuration to save.
        path: Target path. If None, uses the default config path.

    Returns:
        Path the configuration was written to.
    """
    config_path = path or get_config_path()
    Directory(str(config_path.parent)).ensure_exists()
    File(str(config_path)).write_contents(tomli_w.dumps(config.model_dump()).encode("utf-8"))
    logger.debug("Saved config to %s", config_path)
    return config_path
