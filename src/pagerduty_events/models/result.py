"""
Module: result.py
Description: Outcome of a notify call.

EventResult is either a success (status, message, dedup key) or an
error (status, message, errors). For error results ``errors`` holds the
serialized ``errors`` array of a 400 response, or the response body for
every other failing status.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EventResult(BaseModel):
    """Immutable result returned by the dispatcher."""

    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="True when the API accepted the event")
    status: Optional[str] = Field(default=None, description="Status reported by the API")
    message: Optional[str] = Field(default=None, description="Message reported by the API")
    dedup_key: Optional[str] = Field(
        default=None,
        description="Deduplication key assigned to the event"
    )
    errors: Optional[str] = Field(
        default=None,
        description="Serialized errors array or raw response body"
    )

    @classmethod
    def success_event(
        cls,
        status: Optional[str],
        message: Optional[str],
        dedup_key: Optional[str]
    ) -> "EventResult":
        return cls(success=True, status=status, message=message, dedup_key=dedup_key)

    @classmethod
    def error_event(
        cls,
        status: Optional[str],
        message: Optional[str],
        errors: Optional[str]
    ) -> "EventResult":
        return cls(success=False, status=status, message=message, errors=errors)
