"""Configuration management for the sim log tools.

This module provides centralized configuration using pydantic-settings.
All configuration options can be set via environment variables with the
ODT_ prefix, or via a .env file in the working directory.

Environment Variables:
    ODT_LAST_HOUR: Last protection hour in the sim (default: 73)
    ODT_HEADER_ROWS: Header rows above hour 1 in every sheet (default: 3)
    ODT_DEFAULT_DRAFT_RATE: Draft rate assumed before one is set (default: 0.9)
    ODT_PLATINUM_PER_PEASANT: Daily platinum bonus per peasant (default: 4)
    ODT_DAILY_LAND_BONUS: Acres awarded by the daily land bonus (default: 20)
    ODT_LOG_LEVEL: Logging level (default: INFO)
    ODT_DEBUG: Enable debug mode (default: false)
"""

import logging
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from od_tools.utils.logging import get_logger

logger = get_logger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The sim template constants live here so a template revision that shifts
    the hour range or the bonus amounts only needs an environment change.

    Example .env file:
        ODT_LOG_LEVEL=DEBUG
        ODT_LAST_HOUR=96
    """

    model_config = SettingsConfigDict(
        env_prefix="ODT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Sim Template Settings
    # =========================================================================

    last_hour: int = 73
    """Last protection hour processed when no specific hour is requested."""

    header_rows: int = 3
    """Rows above hour 1 in every sheet; hour N lives on row N + header_rows."""

    # =========================================================================
    # Game Rule Settings
    # =========================================================================

    default_draft_rate: float = 0.9
    """Draft rate in effect before the sim sets one explicitly."""

    platinum_per_peasant: int = 4
    """Platinum awarded per peasant by the daily platinum bonus."""

    daily_land_bonus: int = 20
    """Acres awarded by the daily land bonus."""

    # =========================================================================
    # Logging Settings
    # =========================================================================

    log_level: str = "INFO"
    """Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL."""

    debug: bool = False
    """Enable debug mode with tracebacks on fatal errors."""

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return upper_v

    @field_validator("last_hour")
    @classmethod
    def validate_last_hour(cls, v: int) -> int:
        if not 1 <= v <= 500:
            raise ValueError(f"last_hour must be between 1 and 500, got {v}")
        return v

    @field_validator("header_rows")
    @classmethod
    def validate_header_rows(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"header_rows must be at least 0, got {v}")
        return v

    @field_validator("default_draft_rate")
    @classmethod
    def validate_draft_rate(cls, v: float) -> float:
        """Validate the draft rate is a fraction."""
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"default_draft_rate must be between 0.0 and 1.0, got {v}")
        return v

    @field_validator("platinum_per_peasant", "daily_land_bonus")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Bonus amounts must be at least 1, got {v}")
        return v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        level: int = getattr(logging, self.log_level)
        return level

    def to_safe_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dictionary for logging."""
        return {
            "last_hour": self.last_hour,
            "header_rows": self.header_rows,
            "default_draft_rate": self.default_draft_rate,
            "platinum_per_peasant": self.platinum_per_peasant,
            "daily_land_bonus": self.daily_land_bonus,
            "log_level": self.log_level,
            "debug": self.debug,
        }


def validate_settings_on_startup(s: Settings) -> None:
    """Log a configuration summary and warn about unusual template values.

    Args:
        s: Settings instance to validate.
    """
    if s.header_rows != 3:
        logger.warning(
            f"header_rows is {s.header_rows}; the stock protection sim uses 3. "
            "Hours will be read from shifted rows."
        )

    logger.info("Configuration loaded", **s.to_safe_dict())


# Create the global settings instance
settings = Settings()
