"""Application configuration."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Catalogue Settings
    STATIONS_DATA_PATH: str | None = None  # Overrides the packaged stations.json when set

    # Draw Settings
    DEFAULT_DRAW_COUNT: int = Field(default=10, gt=0)
    RANDOM_SEED: int | None = None  # Fixed seed for reproducible draws (CLI only)

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    PACKAGE_LOG_LEVEL: str | None = None  # Level for station_basket.* loggers; inherits LOG_LEVEL when unset

    @field_validator("LOG_LEVEL", "PACKAGE_LOG_LEVEL", mode="after")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Validate and normalize log level."""
        if v is None:
            return None
        normalized = v.upper()
        valid_levels = logging.getLevelNamesMapping()
        if normalized not in valid_levels:
            msg = f"Invalid log level '{v}'. Must be one of: {', '.join(sorted(valid_levels.keys()))}"
            raise ValueError(msg)
        return normalized


settings = Settings()
