"""
Module: delivery/http_api.py
Description: Synchronous event delivery to the PagerDuty Events API.

The calling thread blocks across every attempt and every backoff
delay of a notify call.
"""

import time
from typing import Callable, Optional

import httpx
from tenacity import Retrying

from pagerduty_events.config.endpoints import EndpointConfig
from pagerduty_events.delivery.base import (
    DEFAULT_TIMEOUT_SECONDS,
    REQUEST_HEADERS,
    BaseApiService,
)
from pagerduty_events.delivery.response import Attempt, to_event_result
from pagerduty_events.delivery.retry import (
    RetryPolicy,
    interruptible_sleep,
    retry_options,
)
from pagerduty_events.models.event import PagerDutyEvent
from pagerduty_events.models.result import EventResult
from pagerduty_events.utils.logger import get_logger

logger = get_logger(__name__)


class HttpApiService(BaseApiService):
    """
    Synchronous HTTP client for the Events API.

    Retries 429 and 500 responses along the retry policy when the
    endpoint config enables retries.
    """

    def __init__(
        self,
        config: EndpointConfig,
        retry_policy: Optional[RetryPolicy] = None,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ):
        """
        Initialize the dispatcher.

        Args:
            config: Endpoints, retry switch and proxy
            retry_policy: Backoff ladders per status code
            client: Optional httpx client; it is not closed by close()
            sleep: Blocking sleep used between retries
            timeout_seconds: HTTP timeout in seconds for each attempt
        """
        super().__init__(config, retry_policy, timeout_seconds)

        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client(
            timeout=self.timeout,
            proxy=config.proxy_url
        )
        self._sleep = interruptible_sleep(sleep)

        logger.info(
            "Events API client initialized",
            events_api_url=config.events_api_url,
            change_events_api_url=config.change_events_api_url,
            do_retries=config.do_retries,
            proxy=config.proxy_url
        )

    def notify(self, event: PagerDutyEvent) -> EventResult:
        """
        Send an event and return the API's verdict.

        Args:
            event: Alert or change event

        Returns:
            EventResult of the last attempt

        Raises:
            NotifyEventException: If the request could not be completed
                or a body that must be read is not JSON
        """
        url, body = self._prepare(event)
        retrying = Retrying(sleep=self._sleep, **retry_options(self.retry_policy))
        return to_event_result(retrying(self._attempt, url, body))

    def _attempt(self, url: str, body: str) -> Attempt:
        logger.debug("Attempting event delivery", url=url)
        try:
            response = self.client.post(url, content=body, headers=REQUEST_HEADERS)
        except httpx.HTTPError as e:
            raise self._transport_failure(url, e) from e
        return self._to_attempt(response)

    def close(self) -> None:
        """Close the underlying HTTP client if this service created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "HttpApiService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
