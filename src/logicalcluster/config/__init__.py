"""Configuration loading and file location helpers."""

from logicalcluster.config.config import Config, ConfigError
from logicalcluster.config.paths import ENV_CONFIG_FILE, default_config_path

__all__ = ["Config", "ConfigError", "ENV_CONFIG_FILE", "default_config_path"]
