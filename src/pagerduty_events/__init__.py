"""
Package: pagerduty_events
Description: Client for the PagerDuty Events API v2.

Sends alert and change events over HTTPS and retries rate-limited
and server-error responses with fixed backoff ladders.
"""

from .client import EventsClient
from .config import EndpointConfig, Settings
from .delivery import (
    DEFAULT_RETRY_POLICY,
    ApiServiceFactory,
    AsyncHttpApiService,
    HttpApiService,
    RetryPolicy,
)
from .exceptions import InvalidEventError, NotifyEventException, PagerDutyEventsError
from .models import AlertEvent, AlertPayload, ChangeEvent, ChangePayload, EventResult

__version__ = "0.1.0"

__all__ = [
    "AlertEvent",
    "AlertPayload",
    "ApiServiceFactory",
    "AsyncHttpApiService",
    "ChangeEvent",
    "ChangePayload",
    "DEFAULT_RETRY_POLICY",
    "EndpointConfig",
    "EventResult",
    "EventsClient",
    "HttpApiService",
    "InvalidEventError",
    "NotifyEventException",
    "PagerDutyEventsError",
    "RetryPolicy",
    "Settings",
]
