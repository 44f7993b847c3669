"""
Module: conftest.py
Description: Shared pytest fixtures for Events client tests.

Provides endpoint configurations, sample events and a recording sleep
so retry delays can be asserted without waiting. HTTP traffic is
stubbed with the pytest-httpx ``httpx_mock`` fixture.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from pagerduty_events.config.endpoints import EndpointConfig
from pagerduty_events.models.event import AlertEvent, AlertPayload, ChangeEvent, ChangePayload

EVENTS_API_URL = "https://events.test/v2/enqueue"
CHANGE_EVENTS_API_URL = "https://events.test/v2/change/enqueue"


@pytest.fixture
def endpoint_config():
    """Endpoint configuration with retries disabled."""
    return EndpointConfig(
        events_api_url=EVENTS_API_URL,
        change_events_api_url=CHANGE_EVENTS_API_URL,
        do_retries=False
    )


@pytest.fixture
def retrying_config():
    """Endpoint configuration with retries enabled."""
    return EndpointConfig(
        events_api_url=EVENTS_API_URL,
        change_events_api_url=CHANGE_EVENTS_API_URL,
        do_retries=True
    )


@pytest.fixture
def alert_event():
    """Provide a trigger event."""
    return AlertEvent(
        routing_key="R0UT1NGK3Y",
        event_action="trigger",
        dedup_key="disk-full-web-01",
        payload=AlertPayload(
            summary="Disk almost full on web-01",
            source="web-01",
            severity="critical",
            custom_details={"free_space_mb": 120}
        )
    )


@pytest.fixture
def change_event():
    """Provide a change event."""
    return ChangeEvent(
        routing_key="R0UT1NGK3Y",
        payload=ChangePayload(
            summary="Deployed build 1.4.2",
            source="ci"
        )
    )


@pytest.fixture
def sleep():
    """Recording replacement for time.sleep."""
    return Mock()


@pytest.fixture
def async_sleep():
    """Recording replacement for asyncio.sleep."""
    return AsyncMock()
