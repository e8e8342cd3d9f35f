"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor
principles.  The sensitivity-to-masking policy table is not configurable.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
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
    log_serialize: bool = Field(
        default=False,
        description="Emit all stderr log records as JSON",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            msg = f"Invalid log_level: must be one of {sorted(_LOG_LEVELS)}"
            raise ValueError(msg)
        return v.upper()

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )
    max_payload_fields: int = Field(
        default=200,
        description="Maximum number of top-level keys accepted in a redaction payload",
        gt=0,
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
