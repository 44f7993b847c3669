"""
Module: delivery/response.py
Description: Classification of Events API responses.

Every status code maps to exactly one outcome:
- 200/201/202: success result read from the JSON body
- 400: error result carrying the ``errors`` array
- retryable (429/500 when retries are on) and out of retries:
  error result carrying the re-serialized JSON body
- anything else: error result carrying the raw body
"""

import json
from typing import Any, NamedTuple

import httpx

from pagerduty_events.exceptions import NotifyEventException
from pagerduty_events.models.result import EventResult
from pagerduty_events.utils.json_fields import (
    get_array_value,
    get_property_value,
    to_json_text,
)

SUCCESS_STATUS_CODES = frozenset({
    httpx.codes.OK,
    httpx.codes.CREATED,
    httpx.codes.ACCEPTED,
})


class Attempt(NamedTuple):
    """One physical HTTP attempt of a notify call."""

    response: httpx.Response
    body: Any = None
    retryable: bool = False

    @property
    def status_code(self) -> int:
        return self.response.status_code


def parse_json(response: httpx.Response) -> Any:
    """
    Decode a JSON response body.

    Raises:
        NotifyEventException: If the body is not valid JSON
    """
    try:
        return json.loads(response.text)
    except ValueError as e:
        raise NotifyEventException(
            f"Could not parse {response.status_code} response body as JSON"
        ) from e


def to_event_result(attempt: Attempt) -> EventResult:
    """Turn the final attempt of a notify call into an EventResult."""
    status_code = attempt.status_code

    if status_code in SUCCESS_STATUS_CODES:
        body = parse_json(attempt.response)
        return EventResult.success_event(
            get_property_value(body, "status"),
            get_property_value(body, "message"),
            get_property_value(body, "dedup_key"),
        )

    if status_code == httpx.codes.BAD_REQUEST:
        body = parse_json(attempt.response)
        return EventResult.error_event(
            get_property_value(body, "status"),
            get_property_value(body, "message"),
            get_array_value(body, "errors"),
        )

    if attempt.retryable:
        return EventResult.error_event(str(status_code), "", to_json_text(attempt.body))

    return EventResult.error_event(str(status_code), "", attempt.response.text)
