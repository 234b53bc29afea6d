"""Typed settings loader for the wet weather tool."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    wet_location: str | None = Field(default=None, alias="WET_LOCATION")
    # Kept as free text: an unknown value is only a warning at parse time.
    wet_units: str | None = Field(default=None, alias="WET_UNITS")

    wet_base_url: str = Field(default="http://wxdata.weather.com", alias="WET_BASE_URL")
    wet_timeout_seconds: float = Field(default=15.0, alias="WET_TIMEOUT_SECONDS")
    wet_user_agent: str = Field(default="wet/1.0", alias="WET_USER_AGENT")
    wet_log_level: LogLevel = Field(default="WARNING", alias="WET_LOG_LEVEL")

    @field_validator("wet_location", "wet_units", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat empty env-string values as unset."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("wet_log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_transport(self) -> Settings:
        """Validate the provider endpoint and HTTP client settings."""
        if not self.wet_base_url.startswith(("http://", "https://")):
            raise ValueError("WET_BASE_URL must start with 'http://' or 'https://'.")
        self.wet_base_url = self.wet_base_url.rstrip("/")
        if self.wet_timeout_seconds <= 0:
            raise ValueError("WET_TIMEOUT_SECONDS must be > 0.")
        if not self.wet_user_agent.strip():
            raise ValueError("WET_USER_AGENT must not be empty.")
        return self


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
