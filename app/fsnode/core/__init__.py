"""Core helpers: path strings, config locations and settings."""
