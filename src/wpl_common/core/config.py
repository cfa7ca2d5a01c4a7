"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables (and an optional ``.env`` file).
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Option store
    database_url: str = Field(
        default="sqlite:///./wpl_common.db",
        description="SQLAlchemy connection string for the option store",
    )

    # Geocoding: Google Maps
    google_maps_api_key: str | None = Field(
        default=None,
        description="Google Maps Geocoding API key",
    )
    map_coordinates_option: str = Field(
        default="wplook_map_coordinates",
        min_length=1,
        description="Option name under which geocoded coordinates are cached",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)
        return v.upper()


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
