"""Application settings powered by Pydantic BaseSettings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from request_outcome.transport.config import ClientConfig


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    api_base_url: str = Field(
        default="http://127.0.0.1:8080", validation_alias="API_BASE_URL"
    )
    request_timeout_seconds: float = Field(
        default=30.0, ge=1.0, le=300.0, validation_alias="REQUEST_TIMEOUT_SECONDS"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(default=True, validation_alias="LOG_JSON")

    def to_client_config(self) -> ClientConfig:
        """Build the HTTP client configuration from settings."""
        return ClientConfig(
            base_url=self.api_base_url,
            timeout_seconds=self.request_timeout_seconds,
        )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level, INFO for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
