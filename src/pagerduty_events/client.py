"""
Module: client.py
Description: High level client for sending alert and change events.

Checks that each event matches the action it is sent for and hands
it to a dispatcher.
"""

from typing import Optional

from pagerduty_events.config.settings import Settings, settings as default_settings
from pagerduty_events.delivery.factory import ApiServiceFactory
from pagerduty_events.delivery.http_api import HttpApiService
from pagerduty_events.exceptions import InvalidEventError
from pagerduty_events.models.event import AlertEvent, ChangeEvent
from pagerduty_events.models.result import EventResult


class EventsClient:
    """
    Client for the PagerDuty Events API v2.

    Example:
        >>> with EventsClient.create() as client:
        ...     result = client.trigger(event)
    """

    def __init__(self, api_service: HttpApiService):
        self.api_service = api_service

    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> "EventsClient":
        """Build a client from settings (environment by default)."""
        factory = ApiServiceFactory.from_settings(settings or default_settings)
        return cls(factory.get_default())

    def trigger(self, event: AlertEvent) -> EventResult:
        """Open or update an alert."""
        return self._send_alert(event, "trigger")

    def acknowledge(self, event: AlertEvent) -> EventResult:
        return self._send_alert(event, "acknowledge")

    def resolve(self, event: AlertEvent) -> EventResult:
        return self._send_alert(event, "resolve")

    def track_change(self, event: ChangeEvent) -> EventResult:
        """Send a change event to the change events endpoint."""
        if not isinstance(event, ChangeEvent):
            raise InvalidEventError("track_change expects a ChangeEvent")
        return self.api_service.notify(event)

    def _send_alert(self, event: AlertEvent, action: str) -> EventResult:
        if not isinstance(event, AlertEvent):
            raise InvalidEventError(f"{action} expects an AlertEvent")
        if event.event_action != action:
            raise InvalidEventError(
                f"Cannot {action} with an event whose action is {event.event_action}"
            )
        if action != "trigger" and not event.dedup_key:
            raise InvalidEventError(f"dedup_key is required to {action} an alert")
        return self.api_service.notify(event)

    def close(self) -> None:
        self.api_service.close()

    def __enter__(self) -> "EventsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
