"""
Module: event.py
Description: Event data models for the PagerDuty Events API v2.

Defines the alert and change events accepted by the Events API. The
dispatcher only cares about an event's kind, which picks the endpoint
it is posted to; the remaining fields are serialized as-is.

Key Components:
- EventKind: Enum separating alert events from change events
- AlertEvent: trigger / acknowledge / resolve events
- ChangeEvent: deployment and change notifications
- Validation: Pydantic v2 with custom field validators

Dependencies: pydantic, datetime, typing
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EventKind(str, Enum):
    """Kind of event, used to route it to the matching endpoint."""

    ALERT = "alert"
    CHANGE = "change"


class Link(BaseModel):
    """Link attached to an event."""

    href: str = Field(..., min_length=1, description="Link target URL")
    text: Optional[str] = Field(default=None, description="Link text")


class Image(BaseModel):
    """Image attached to an alert event."""

    src: str = Field(..., min_length=1, description="Image source URL")
    href: Optional[str] = Field(default=None, description="Optional link target")
    alt: Optional[str] = Field(default=None, description="Alternative text")


class AlertPayload(BaseModel):
    """Payload of a trigger event."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(..., min_length=1, max_length=1024)
    source: str = Field(..., min_length=1)
    severity: str = Field(
        ...,
        pattern=r"^(critical|error|warning|info)$",
        description="Perceived severity of the affected system"
    )
    timestamp: Optional[datetime] = None
    component: Optional[str] = None
    group: Optional[str] = None
    event_class: Optional[str] = Field(default=None, alias="class")
    custom_details: Optional[Dict[str, Any]] = None


class ChangePayload(BaseModel):
    """Payload of a change event."""

    summary: str = Field(..., min_length=1, max_length=1024)
    source: Optional[str] = None
    timestamp: Optional[datetime] = None
    custom_details: Optional[Dict[str, Any]] = None


class PagerDutyEvent(BaseModel):
    """
    Base class of every event sent to the Events API.

    Attributes:
        routing_key: Integration key of the target service
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    routing_key: str = Field(
        ...,
        min_length=1,
        description="Integration key the event is routed with"
    )

    @property
    def kind(self) -> EventKind:
        return EventKind.ALERT

    def to_json(self) -> str:
        """Serialize the event as the JSON request body."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class AlertEvent(PagerDutyEvent):
    """
    Alert event: opens, acknowledges or resolves an incident.

    Attributes:
        event_action: trigger, acknowledge or resolve
        dedup_key: Key correlating events of the same alert
        payload: Alert details (required for trigger)
        images: Optional images shown with the incident
        links: Optional links shown with the incident
        client: Name of the monitoring client
        client_url: URL of the monitoring client
    """

    event_action: str = Field(
        default="trigger",
        pattern=r"^(trigger|acknowledge|resolve)$",
        description="Action applied to the alert"
    )
    dedup_key: Optional[str] = Field(default=None, max_length=255)
    payload: Optional[AlertPayload] = None
    images: Optional[List[Image]] = None
    links: Optional[List[Link]] = None
    client: Optional[str] = None
    client_url: Optional[str] = None

    @model_validator(mode="after")
    def validate_trigger_payload(self) -> "AlertEvent":
        """Trigger events must carry a payload."""
        if self.event_action == "trigger" and self.payload is None:
            raise ValueError("payload is required for trigger events")
        return self


class ChangeEvent(PagerDutyEvent):
    """Change event, e.g. a deployment notification."""

    payload: ChangePayload
    links: Optional[List[Link]] = None

    @property
    def kind(self) -> EventKind:
        return EventKind.CHANGE
