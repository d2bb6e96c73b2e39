"""Configuration management for row-spreader.

This module provides a pydantic-based configuration system that loads settings
from environment variables (and an optional ``.env`` file) and exposes the
options consumed by the conversion pipeline.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from row_spreader.paths.combine import CombineMode


class Config(BaseSettings):
    """Configuration settings for row-spreader.

    This class uses pydantic-settings to automatically load configuration
    from environment variables. All settings can be overridden by setting
    the corresponding environment variable, and the CLI overrides them again
    with its own options.

    Environment Variables:
        ROW_SPREADER_FLATTEN: Drop array iterators from column names (true/false)
        ROW_SPREADER_COMBINE_MODE: How document paths form the header ('union' or 'intersect')
        ROW_SPREADER_SEPARATOR: Output field separator, a single character
        ROW_SPREADER_WORKERS: Number of threads used for per-document work
        ROW_SPREADER_LOG_LEVEL: Log level name (e.g., 'INFO', 'DEBUG')

    Example:
        >>> config = Config()
        >>> config.separator
        ';'
    """

    model_config = SettingsConfigDict(
        env_prefix="ROW_SPREADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    flatten: bool = Field(
        default=False,
        description="Drop array iterators from column names; colliding columns keep the last value",
    )

    combine_mode: CombineMode = Field(
        default=CombineMode.UNION,
        description="How per-document paths are combined into the header",
    )

    separator: str = Field(default=";", description="Output field separator")

    workers: int = Field(default=1, ge=1, description="Threads used for per-document work")

    log_level: str = Field(default="WARNING", description="Log level name")

    @field_validator("separator")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"separator must be a single character, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def validate_config(self) -> dict[str, bool]:
        """Report which settings differ from their defaults.

        Returns:
            Dictionary with one flag per setting:
            {
                "flatten_configured": bool,
                "combine_mode_configured": bool,
                "separator_configured": bool,
                "workers_configured": bool,
            }
        """
        return {
            "flatten_configured": self.flatten,
            "combine_mode_configured": self.combine_mode != CombineMode.UNION,
            "separator_configured": self.separator != ";",
            "workers_configured": self.workers != 1,
        }

    def __repr__(self) -> str:
        """Return a string representation of the configuration."""
        return (
            f"Config("
            f"flatten={self.flatten!r}, "
            f"combine_mode={self.combine_mode.value!r}, "
            f"separator={self.separator!r}, "
            f"workers={self.workers!r}, "
            f"log_level={self.log_level!r}"
            f")"
        )


def load_config() -> Config:
    """Load configuration from environment variables.

    Returns:
        A Config instance with settings loaded from environment.
    """
    return Config()
