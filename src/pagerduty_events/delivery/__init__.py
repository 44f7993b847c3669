"""
Package: delivery
Description: Event delivery to the PagerDuty Events API.

Provides sync and async dispatchers with status-dependent retry
of rate-limited and server-error responses.
"""

from .async_http_api import AsyncHttpApiService
from .factory import ApiServiceFactory
from .http_api import HttpApiService
from .retry import DEFAULT_RETRY_POLICY, RetryPolicy

__all__ = [
    "ApiServiceFactory",
    "AsyncHttpApiService",
    "DEFAULT_RETRY_POLICY",
    "HttpApiService",
    "RetryPolicy",
]
