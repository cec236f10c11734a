"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the locations of the
network data files and the logging setup.

Configuration can be overridden via environment variables:
- RAILNET_NETWORK_DATA_DIR=/path/to/data
- RAILNET_NETWORK_LINES_FILE=WMRlines.csv
- RAILNET_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class NetworkConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with RAILNET_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    lines_file: str = "lines.csv"
    step_free_file: str = "step_free.csv"
    encoding: str = "utf-8"

    @property
    def lines_path(self) -> Path:
        """Full path to the route segments CSV file."""
        return self.data_dir / self.lines_file

    @property
    def step_free_path(self) -> Path:
        """Full path to the step-free stations CSV file."""
        return self.data_dir / self.step_free_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RAILNET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.lines_path)

    Environment variables prefixed with RAILNET_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the logging level and format from configuration.

    Raises:
        ConfigurationError: If the level is not a known logging level.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="RAILNET_LOG_LEVEL",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)
