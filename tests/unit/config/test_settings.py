"""
Module: test_settings.py
Description: Unit tests for settings and endpoint configuration.
"""

import pytest
from pydantic import ValidationError

from pagerduty_events.config.endpoints import (
    DEFAULT_CHANGE_EVENTS_API_URL,
    DEFAULT_EVENTS_API_URL,
    EndpointConfig,
)
from pagerduty_events.config.settings import Settings
from pagerduty_events.models.event import EventKind


class TestSettings:
    """Test cases for Settings loaded from the environment."""

    def test_defaults(self, monkeypatch):
        for name in ("EVENTS_API_URL", "CHANGE_EVENTS_API_URL", "DO_RETRIES", "LOG_LEVEL"):
            monkeypatch.delenv(f"PAGERDUTY_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.events_api_url == DEFAULT_EVENTS_API_URL
        assert settings.change_events_api_url == DEFAULT_CHANGE_EVENTS_API_URL
        assert settings.do_retries is False
        assert settings.timeout_seconds == 10

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("PAGERDUTY_DO_RETRIES", "true")
        monkeypatch.setenv("PAGERDUTY_PROXY_HOST", "proxy.internal")
        monkeypatch.setenv("PAGERDUTY_PROXY_PORT", "3128")
        monkeypatch.setenv("PAGERDUTY_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.do_retries is True
        assert settings.log_level == "DEBUG"
        assert settings.endpoint_config().proxy_url == "http://proxy.internal:3128"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_url(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, events_api_url="events.pagerduty.com/v2/enqueue")

    def test_proxy_port_without_host(self, monkeypatch):
        monkeypatch.delenv("PAGERDUTY_PROXY_HOST", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None, proxy_port=8080)


class TestEndpointConfig:
    """Test cases for EndpointConfig."""

    def test_url_for_kind(self, endpoint_config):
        assert endpoint_config.url_for(EventKind.ALERT) == endpoint_config.events_api_url
        assert endpoint_config.url_for(EventKind.CHANGE) == endpoint_config.change_events_api_url

    def test_no_proxy(self, endpoint_config):
        assert endpoint_config.proxy_url is None

    def test_frozen(self, endpoint_config):
        with pytest.raises(ValidationError):
            endpoint_config.do_retries = True

    def test_invalid_proxy_port(self):
        with pytest.raises(ValidationError):
            EndpointConfig(proxy_host="localhost", proxy_port=70000)
