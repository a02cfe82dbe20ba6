"""Configuration management for the logicalcluster command line tool."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from logicalcluster.config.paths import default_config_path
from logicalcluster.platform.logging import logger


class ConfigError(ValueError):
    """Raised when the configuration file cannot be used."""

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration in {source}: {reason}")
        self.source: Path = source
        self.reason: str = reason


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Command line configuration."""

    # Optional rotating log file
    log_file: Path | None = _path_field()

    # Console log level name, e.g. "INFO" or "DEBUG"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @property
    def console_level(self) -> int:
        """Return the numeric logging level for console output."""
        return logging.getLevelNamesMapping().get(self.log_level.upper(), logging.INFO)

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load configuration from a TOML file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when the file is absent.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        source = config_file if config_file is not None else default_config_path()

        if not source.exists():
            logger.debug("No configuration at %s, using defaults", source)
            return cls()

        try:
            with open(source, "rb") as f:
                config_dict = tomllib.load(f)
            instance = cls._from_dict(source, config_dict)
        except tomllib.TOMLDecodeError as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(source, str(e)) from e
        except ConfigError as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        logger.debug("Configuration loaded from %s", source)
        return instance

    @classmethod
    def _from_dict(cls, source: Path, config_dict: dict[str, Any]) -> Config:
        """Build a config from parsed TOML, ignoring unknown keys."""

        known = {f.name for f in fields(cls)}
        for key in sorted(set(config_dict) - known):
            logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)

        log_file = config_dict.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(source, "log_file must be a string")

        log_level = config_dict.get("log_level", "INFO")
        if not isinstance(log_level, str):
            raise ConfigError(source, "log_level must be a string")
        if log_level.upper() not in logging.getLevelNamesMapping():
            raise ConfigError(source, f"unknown log_level '{log_level}'")

        return cls(log_file=log_file, log_level=log_level.upper())  # pyright: ignore[reportArgumentType]


__all__ = ["Config", "ConfigError"]
