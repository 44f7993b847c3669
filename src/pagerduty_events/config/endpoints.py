"""
Module: endpoints.py
Description: Immutable endpoint configuration shared by all dispatch calls.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pagerduty_events.models.event import EventKind

DEFAULT_EVENTS_API_URL = "https://events.pagerduty.com/v2/enqueue"
DEFAULT_CHANGE_EVENTS_API_URL = "https://events.pagerduty.com/v2/change/enqueue"


def validate_http_url(v: str) -> str:
    """Validate that a value is an HTTP/HTTPS URL."""
    if not v or not isinstance(v, str):
        raise ValueError("URL must be a non-empty string")
    if not v.startswith(('http://', 'https://')):
        raise ValueError("URL must be a valid HTTP/HTTPS URL")
    return v


class EndpointConfig(BaseModel):
    """
    Target endpoints and retry switch of a dispatcher.

    Attributes:
        events_api_url: Endpoint for alert events
        change_events_api_url: Endpoint for change events
        do_retries: Retry 429 and 500 responses when True
        proxy_host: Optional HTTP proxy host
        proxy_port: Optional HTTP proxy port
    """

    model_config = ConfigDict(frozen=True)

    events_api_url: str = Field(default=DEFAULT_EVENTS_API_URL)
    change_events_api_url: str = Field(default=DEFAULT_CHANGE_EVENTS_API_URL)
    do_retries: bool = Field(default=False)
    proxy_host: Optional[str] = Field(default=None, min_length=1)
    proxy_port: Optional[int] = Field(default=None, ge=1, le=65535)

    @field_validator('events_api_url', 'change_events_api_url')
    @classmethod
    def validate_urls(cls, v: str) -> str:
        return validate_http_url(v)

    @model_validator(mode="after")
    def validate_proxy(self) -> "EndpointConfig":
        """Proxy host and port are given together or not at all."""
        if (self.proxy_host is None) != (self.proxy_port is None):
            raise ValueError("proxy_host and proxy_port must be set together")
        return self

    @property
    def proxy_url(self) -> Optional[str]:
        if self.proxy_host is None:
            return None
        return f"http://{self.proxy_host}:{self.proxy_port}"

    def url_for(self, kind: EventKind) -> str:
        """Return the endpoint events of the given kind are posted to."""
        if kind == EventKind.CHANGE:
            return self.change_events_api_url
        return self.events_api_url
