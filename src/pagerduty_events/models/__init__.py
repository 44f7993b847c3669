"""
Package: models
Description: Pydantic data models for events and delivery results.

- AlertEvent / ChangeEvent: events sent to the Events API
- EventResult: outcome of a notify call
"""

from .event import (
    AlertEvent,
    AlertPayload,
    ChangeEvent,
    ChangePayload,
    EventKind,
    Image,
    Link,
    PagerDutyEvent,
)
from .result import EventResult

__all__ = [
    "AlertEvent",
    "AlertPayload",
    "ChangeEvent",
    "ChangePayload",
    "EventKind",
    "EventResult",
    "Image",
    "Link",
    "PagerDutyEvent",
]
