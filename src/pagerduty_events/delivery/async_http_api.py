"""
Module: delivery/async_http_api.py
Description: Asynchronous event delivery to the PagerDuty Events API.

Same classification and retry rules as HttpApiService. Backoff delays
are awaited, so concurrent notify calls share one event loop; the
attempts of a single call still run strictly one after another.
"""

import asyncio
from typing import Awaitable, Callable, Optional

import httpx
from tenacity import AsyncRetrying

from pagerduty_events.config.endpoints import EndpointConfig
from pagerduty_events.delivery.base import (
    DEFAULT_TIMEOUT_SECONDS,
    REQUEST_HEADERS,
    BaseApiService,
)
from pagerduty_events.delivery.response import Attempt, to_event_result
from pagerduty_events.delivery.retry import RetryPolicy, retry_options
from pagerduty_events.models.event import PagerDutyEvent
from pagerduty_events.models.result import EventResult
from pagerduty_events.utils.logger import get_logger

logger = get_logger(__name__)


class AsyncHttpApiService(BaseApiService):
    """Asynchronous HTTP client for the Events API."""

    def __init__(
        self,
        config: EndpointConfig,
        retry_policy: Optional[RetryPolicy] = None,
        client: Optional[httpx.AsyncClient] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ):
        super().__init__(config, retry_policy, timeout_seconds)

        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient(
            timeout=self.timeout,
            proxy=config.proxy_url
        )
        self._sleep = sleep

        logger.info(
            "Async Events API client initialized",
            events_api_url=config.events_api_url,
            change_events_api_url=config.change_events_api_url,
            do_retries=config.do_retries,
            proxy=config.proxy_url
        )

    async def notify(self, event: PagerDutyEvent) -> EventResult:
        """
        Send an event and return the API's verdict.

        Cancelling the task cancels the pending attempt or delay.

        Raises:
            NotifyEventException: If the request could not be completed
                or a body that must be read is not JSON
        """
        url, body = self._prepare(event)
        retrying = AsyncRetrying(sleep=self._sleep, **retry_options(self.retry_policy))
        return to_event_result(await retrying(self._attempt, url, body))

    async def _attempt(self, url: str, body: str) -> Attempt:
        logger.debug("Attempting event delivery", url=url)
        try:
            response = await self.client.post(url, content=body, headers=REQUEST_HEADERS)
        except httpx.HTTPError as e:
            raise self._transport_failure(url, e) from e
        return self._to_attempt(response)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this service created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "AsyncHttpApiService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
