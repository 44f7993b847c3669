"""
Module: delivery/retry.py
Description: Retry policy for event delivery.

Each retryable status code owns a fixed ladder of backoff delays, one
entry consumed per retry. The retry counter is shared by the whole
notify call: when a retry comes back with a different retryable
status, that status's ladder is used from the current position on.
"""

from typing import Any, Callable, Dict, Tuple

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator
from tenacity import RetryCallState, retry_if_result

from pagerduty_events.utils.logger import get_logger

logger = get_logger(__name__)


def retry_count(retry_state: RetryCallState) -> int:
    """Number of retries already taken before the current attempt."""
    return retry_state.attempt_number - 1


def _last_status(retry_state: RetryCallState) -> int:
    return retry_state.outcome.result().status_code


class RetryPolicy(BaseModel):
    """
    Mapping of status code to backoff delays in seconds.

    Status codes missing from the mapping are never retried.
    """

    model_config = ConfigDict(frozen=True)

    delays: Dict[int, Tuple[float, ...]] = Field(default_factory=dict)

    @field_validator('delays')
    @classmethod
    def validate_delays(cls, v: Dict[int, Tuple[float, ...]]) -> Dict[int, Tuple[float, ...]]:
        for status_code, ladder in v.items():
            if not 100 <= status_code <= 599:
                raise ValueError(f"Invalid HTTP status code: {status_code}")
            if any(delay < 0 for delay in ladder):
                raise ValueError(f"Delays for {status_code} must not be negative")
        return v

    def covers(self, status_code: int) -> bool:
        return status_code in self.delays

    def ladder(self, status_code: int) -> Tuple[float, ...]:
        return self.delays.get(status_code, ())

    def should_stop(self, retry_state: RetryCallState) -> bool:
        """tenacity stop condition: the ladder of the last status is used up."""
        return retry_count(retry_state) >= len(self.ladder(_last_status(retry_state)))

    def wait(self, retry_state: RetryCallState) -> float:
        """
        tenacity wait strategy: next delay on the ladder of the last status.

        tenacity 9 computes the wait before consulting the stop
        condition, so this is also called on the attempt that ends the
        call. Past the end of the ladder it returns 0 and leaves the
        exhaustion decision to should_stop.
        """
        ladder = self.ladder(_last_status(retry_state))
        count = retry_count(retry_state)
        return ladder[count] if count < len(ladder) else 0.0


DEFAULT_RETRY_POLICY = RetryPolicy(delays={
    # quick retries to ride out flapping server errors
    httpx.codes.INTERNAL_SERVER_ERROR: (0.5, 1.0, 2.0),
    # slow retries to give the rate limit time to clear
    httpx.codes.TOO_MANY_REQUESTS: (10.0, 25.0, 55.0),
})


def _exhausted(retry_state: RetryCallState) -> Any:
    attempt = retry_state.outcome.result()
    logger.debug(
        "Retryable response received, retries exhausted",
        status_code=attempt.status_code,
        attempts=retry_state.attempt_number,
    )
    return attempt


def interruptible_sleep(sleep: Callable[[float], None]) -> Callable[[float], None]:
    """
    Wrap a blocking sleep so an interrupted wait does not end the retries.

    The retry still happens after an InterruptedError; only the
    remainder of the delay is skipped.
    """
    def _sleep(seconds: float) -> None:
        try:
            sleep(seconds)
        except InterruptedError:
            logger.warning(
                "Retry delay interrupted, retrying immediately",
                delay_seconds=seconds,
            )
    return _sleep


def retry_options(policy: RetryPolicy) -> Dict[str, Any]:
    """
    Build keyword arguments for tenacity Retrying / AsyncRetrying.

    Results are retried while they are flagged retryable; exceptions
    are never retried and propagate unchanged. On exhaustion the last
    result is returned instead of raising RetryError.
    """
    def log_retry(retry_state: RetryCallState) -> None:
        status_code = _last_status(retry_state)
        logger.debug(
            "Retryable response received, will retry",
            status_code=status_code,
            retry=retry_count(retry_state) + 1,
            max_retries=len(policy.ladder(status_code)),
            delay_seconds=retry_state.next_action.sleep,
        )

    return {
        "retry": retry_if_result(lambda attempt: attempt.retryable),
        "stop": policy.should_stop,
        "wait": policy.wait,
        "before_sleep": log_retry,
        "retry_error_callback": _exhausted,
    }
