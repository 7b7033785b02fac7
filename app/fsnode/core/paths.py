"""XDG-compliant path management for fsnode.

XDG defaults:
- Config: ~/.config/fsnode/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fsnode"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/fsnode/ (or XDG_CONFIG_HOME/fsnode/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default config file path.

    Returns:
        Path to ~/.config/fsnode/config.toml.
    """
    return get_config_dir() / "config.toml"
