"""
Module: exceptions.py
Description: Exception hierarchy for the PagerDuty Events client.

Only failures of the HTTP exchange itself (and bodies that cannot be
parsed) are raised. Every classified API response is returned to the
caller as an EventResult instead.
"""


class PagerDutyEventsError(Exception):
    """Base class for all client errors."""


class NotifyEventException(PagerDutyEventsError):
    """
    Raised when an event could not be delivered.

    Wraps the underlying transport or parsing error, which is kept
    as ``__cause__``.
    """


class InvalidEventError(PagerDutyEventsError):
    """Raised when an event is rejected before it is sent."""
