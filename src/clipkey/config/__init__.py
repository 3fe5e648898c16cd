"""Configuration loading, schema, and defaults."""

from clipkey.config.loader import ConfigError, load_config
from clipkey.config.schema import ClipkeyConfig

__all__ = [
    "ClipkeyConfig",
    "ConfigError",
    "load_config",
]
