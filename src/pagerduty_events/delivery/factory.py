"""
Module: delivery/factory.py
Description: Construction of dispatchers from plain parameters or settings.
"""

from typing import Optional

from pagerduty_events.config.endpoints import EndpointConfig
from pagerduty_events.config.settings import Settings
from pagerduty_events.delivery.async_http_api import AsyncHttpApiService
from pagerduty_events.delivery.base import DEFAULT_TIMEOUT_SECONDS
from pagerduty_events.delivery.http_api import HttpApiService
from pagerduty_events.delivery.retry import RetryPolicy


class ApiServiceFactory:
    """
    Builds Events API dispatchers sharing one endpoint configuration.

    Args:
        events_api_url: Endpoint for alert events
        change_events_api_url: Endpoint for change events
        proxy_host: Optional HTTP proxy host
        proxy_port: Optional HTTP proxy port
        do_retries: Retry rate-limited and server-error responses
        retry_policy: Optional backoff ladders per status code
        timeout_seconds: HTTP timeout in seconds for each attempt
    """

    def __init__(
        self,
        events_api_url: str,
        change_events_api_url: str,
        proxy_host: Optional[str] = None,
        proxy_port: Optional[int] = None,
        do_retries: bool = False,
        retry_policy: Optional[RetryPolicy] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ):
        self.config = EndpointConfig(
            events_api_url=events_api_url,
            change_events_api_url=change_events_api_url,
            proxy_host=proxy_host,
            proxy_port=proxy_port,
            do_retries=do_retries,
        )
        self.retry_policy = retry_policy
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApiServiceFactory":
        return cls(
            settings.events_api_url,
            settings.change_events_api_url,
            proxy_host=settings.proxy_host,
            proxy_port=settings.proxy_port,
            do_retries=settings.do_retries,
            timeout_seconds=settings.timeout_seconds,
        )

    def get_default(self) -> HttpApiService:
        return HttpApiService(
            self.config,
            retry_policy=self.retry_policy,
            timeout_seconds=self.timeout_seconds
        )

    def get_default_async(self) -> AsyncHttpApiService:
        return AsyncHttpApiService(
            self.config,
            retry_policy=self.retry_policy,
            timeout_seconds=self.timeout_seconds
        )
