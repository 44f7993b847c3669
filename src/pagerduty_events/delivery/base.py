"""
Module: delivery/base.py
Description: State and helpers shared by the sync and async dispatchers.
"""

from typing import Optional, Tuple

import httpx

from pagerduty_events.config.endpoints import EndpointConfig
from pagerduty_events.delivery.response import Attempt, parse_json
from pagerduty_events.delivery.retry import DEFAULT_RETRY_POLICY, RetryPolicy
from pagerduty_events.exceptions import NotifyEventException
from pagerduty_events.models.event import PagerDutyEvent
from pagerduty_events.utils.logger import get_logger

logger = get_logger(__name__)

REQUEST_HEADERS = {
    'Content-Type': 'application/json',
    'Accept': 'application/json',
}

DEFAULT_TIMEOUT_SECONDS = 10


class BaseApiService:
    """
    Common part of HttpApiService and AsyncHttpApiService.

    Two services are equal when they post to the same endpoints with
    the same retry switch; proxy settings are not compared.
    """

    def __init__(
        self,
        config: EndpointConfig,
        retry_policy: Optional[RetryPolicy] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ):
        if not isinstance(config, EndpointConfig):
            raise ValueError("config must be an EndpointConfig instance")

        self.config = config
        self.retry_policy = retry_policy if retry_policy is not None else DEFAULT_RETRY_POLICY
        self.timeout = httpx.Timeout(timeout_seconds, connect=timeout_seconds)

    def _prepare(self, event: PagerDutyEvent) -> Tuple[str, str]:
        """Return the target URL and JSON body for an event."""
        if not isinstance(event, PagerDutyEvent):
            raise ValueError("event must be a PagerDutyEvent instance")
        return self.config.url_for(event.kind), event.to_json()

    def _to_attempt(self, response: httpx.Response) -> Attempt:
        logger.debug(
            "Events API response received",
            status_code=response.status_code,
            body=response.text
        )

        if self.config.do_retries and self.retry_policy.covers(response.status_code):
            return Attempt(response, parse_json(response), retryable=True)
        return Attempt(response)

    def _transport_failure(self, url: str, error: httpx.HTTPError) -> NotifyEventException:
        logger.warning(
            "Event delivery failed",
            url=url,
            error=str(error),
            error_type=type(error).__name__
        )
        return NotifyEventException(f"Could not send event to {url}: {error}")

    def _key(self):
        return (
            self.config.events_api_url,
            self.config.change_events_api_url,
            self.config.do_retries,
        )

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f"{type(self).__name__}(events_api_url={self.config.events_api_url!r}, "
            f"change_events_api_url={self.config.change_events_api_url!r}, "
            f"do_retries={self.config.do_retries!r})"
        )
