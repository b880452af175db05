"""
Module: settings.py
Description: Runtime settings using pydantic-settings.

These are ambient knobs for the plugin process, read from EVENT_PUSH_*
environment variables. The defaults reproduce the documented behavior;
target configuration itself lives in the JSON config files.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Plugin settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVENT_PUSH_",
        case_sensitive=False,
        extra="ignore"
    )

    service_name: str = Field(
        default="opencode-event-push",
        description="Service name reported in host log records"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    # Config file locations
    config_filename: str = Field(
        default="opencode-event-push.json",
        min_length=1,
        description="File name looked up in the global and project directories"
    )
    global_config_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding the global config file (default ~/.config/opencode)"
    )

    # Delivery defaults
    default_retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Total delivery attempts when a target sets none"
    )
    default_retry_delay_ms: int = Field(
        default=500,
        ge=0,
        description="Base backoff delay in milliseconds when a target sets none"
    )
    delivery_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="HTTP timeout in seconds (unset keeps the httpx default)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    def resolve_global_config_dir(self) -> Path:
        """Return the global config directory, defaulting under the user's home."""
        if self.global_config_dir is not None:
            return self.global_config_dir
        return Path.home() / ".config" / "opencode"


# Global settings instance
settings = Settings()
