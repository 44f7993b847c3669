"""
Module: settings.py
Description: Client configuration using pydantic-settings.

Loads client settings from PAGERDUTY_* environment variables with
validation and defaults. Supports .env files for local development.
"""

from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagerduty_events.config.endpoints import (
    DEFAULT_CHANGE_EVENTS_API_URL,
    DEFAULT_EVENTS_API_URL,
    EndpointConfig,
    validate_http_url,
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGERDUTY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Endpoint settings
    events_api_url: str = Field(
        default=DEFAULT_EVENTS_API_URL,
        description="Events API endpoint for alert events"
    )
    change_events_api_url: str = Field(
        default=DEFAULT_CHANGE_EVENTS_API_URL,
        description="Events API endpoint for change events"
    )

    # Delivery settings
    do_retries: bool = Field(
        default=False,
        description="Retry rate-limited and server-error responses"
    )
    timeout_seconds: int = Field(
        default=10,
        ge=1,
        le=60,
        description="HTTP timeout in seconds for each attempt"
    )

    # Proxy settings
    proxy_host: Optional[str] = Field(default=None, description="HTTP proxy host")
    proxy_port: Optional[int] = Field(
        default=None,
        ge=1,
        le=65535,
        description="HTTP proxy port"
    )

    @field_validator('events_api_url', 'change_events_api_url')
    @classmethod
    def validate_urls(cls, v: str) -> str:
        """Validate endpoint URLs."""
        return validate_http_url(v)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @model_validator(mode="after")
    def validate_proxy(self) -> "Settings":
        if (self.proxy_host is None) != (self.proxy_port is None):
            raise ValueError("proxy_host and proxy_port must be set together")
        return self

    def endpoint_config(self) -> EndpointConfig:
        """Build the immutable endpoint configuration."""
        return EndpointConfig(
            events_api_url=self.events_api_url,
            change_events_api_url=self.change_events_api_url,
            do_retries=self.do_retries,
            proxy_host=self.proxy_host,
            proxy_port=self.proxy_port,
        )


# Global settings instance
settings = Settings()
