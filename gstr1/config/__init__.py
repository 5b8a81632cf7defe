"""Configuration loading (YAML + JSON schema)."""

from .loader import ConfigError, ImportConfig, default_config, load_config

__all__ = ["ConfigError", "ImportConfig", "default_config", "load_config"]
