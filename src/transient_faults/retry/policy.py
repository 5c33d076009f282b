"""
Wait-and-retry policy driven by result classification.

The policy runs an operation, asks a classifier whether the returned result
is transient, and if so waits and runs the operation again, up to
`max_retries` more times. Exceptions raised by the operation are never
retried; they propagate to the caller on the attempt that raised them.
"""

import asyncio
import logging
import math
import numbers
import threading
import time
from dataclasses import dataclass
from functools import partial
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from .backoff import calculate_backoff, linear_backoff
from .classifiers import OutcomeClassifier, StatusCodeClassifier, is_transient_status
from .config import RetryConfig
from ..exceptions import CancelledError, ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DelayFunction = Callable[[int], float]
RetryCallback = Callable[[int, Any, float], None]


@dataclass(frozen=True)
class RetryDecision:
    """
    What to do after an attempt.

    Attributes:
        should_retry: Whether the operation should be invoked again
        delay: Seconds to wait before the next attempt (0 when not retrying)
        exhausted: True when the result was transient but no retries remain
    """

    should_retry: bool
    delay: float = 0.0
    exhausted: bool = False


_TERMINAL = RetryDecision(should_retry=False)
_EXHAUSTED = RetryDecision(should_retry=False, exhausted=True)


def _describe(result: Any) -> str:
    status_code = getattr(result, "status_code", None)
    if status_code is not None:
        return f"status {status_code}"
    return repr(result)


def _operation_name(operation: Callable[..., Any]) -> str | None:
    func = operation.func if isinstance(operation, partial) else operation
    return getattr(func, "__qualname__", None)


class RetryPolicy:
    """
    Immutable wait-and-retry policy.

    A single instance can be shared between threads and tasks: the attempt
    counter lives in each execute call, never on the policy.
    """

    def __init__(
        self,
        retry_on: OutcomeClassifier | Iterable[int] = is_transient_status,
        max_retries: int = 5,
        delay: DelayFunction = linear_backoff,
        *,
        sleep: Callable[[float], None] = time.sleep,
        async_sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_retry: RetryCallback | None = None,
    ):
        """
        Initialize the policy.

        Args:
            retry_on: Predicate over a result, or a collection of status codes
                that mark a result as transient
            max_retries: Number of retries allowed after the first attempt
            delay: Maps the attempt number (1..max_retries) to seconds to wait
            sleep: Blocking sleep used by execute
            async_sleep: Awaitable sleep used by execute_async
            on_retry: Optional callback(attempt, result, delay) called before each wait

        Raises:
            ConfigurationError: If max_retries is negative, delay is not callable
                or returns a negative or non-finite value, or retry_on is neither
                a predicate nor a collection of status codes
        """
        if isinstance(max_retries, bool) or not isinstance(max_retries, int):
            raise ConfigurationError(f"max_retries must be an int, got {max_retries!r}")
        if max_retries < 0:
            raise ConfigurationError(f"max_retries must be >= 0, got {max_retries}")
        if not callable(delay):
            raise ConfigurationError(f"delay must be callable, got {delay!r}")

        for attempt in range(1, max_retries + 1):
            value = delay(attempt)
            if (
                isinstance(value, bool)
                or not isinstance(value, numbers.Real)
                or not math.isfinite(value)
                or value < 0
            ):
                raise ConfigurationError(
                    f"delay({attempt}) must be a non-negative number of seconds, got {value!r}"
                )

        if callable(retry_on):
            classifier = retry_on
        else:
            try:
                classifier = StatusCodeClassifier.of(retry_on)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"retry_on must be a predicate or status codes, got {retry_on!r}"
                ) from e

        self._classifier: OutcomeClassifier = classifier
        self._max_retries = max_retries
        self._delay = delay
        self._sleep = sleep
        self._async_sleep = async_sleep
        self._on_retry = on_retry

    @classmethod
    def from_config(cls, config: RetryConfig | None = None, **kwargs: Any) -> "RetryPolicy":
        """Build a status-code policy from a RetryConfig (default: RetryConfig())."""
        if config is None:
            config = RetryConfig()
        return cls(
            config.retryable_status_codes,
            config.max_retries,
            partial(calculate_backoff, config=config),
            **kwargs,
        )

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def classifier(self) -> OutcomeClassifier:
        return self._classifier

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the given attempt produced a transient result."""
        return float(self._delay(attempt))

    def decide(self, result: Any, attempt: int) -> RetryDecision:
        """
        Decide what to do with the result of an attempt.

        Args:
            result: Value returned by the operation
            attempt: One-based number of the attempt that produced it

        Returns:
            A terminal decision for non-transient results or when retries are
            exhausted, otherwise a retry decision carrying the delay
        """
        if not self._classifier(result):
            return _TERMINAL
        if attempt > self._max_retries:
            return _EXHAUSTED
        return RetryDecision(should_retry=True, delay=self.delay_for(attempt))

    def execute(
        self,
        operation: Callable[[], T],
        *,
        cancel_event: threading.Event | None = None,
    ) -> T:
        """
        Run a synchronous operation under the policy.

        Args:
            operation: Zero-argument callable performing one attempt
            cancel_event: Optional event; once set, the loop stops before the
                next attempt or as soon as the current wait is interrupted

        Returns:
            The last result produced, whether terminal or exhausted

        Raises:
            CancelledError: If cancel_event is set before the loop finishes
            Exception: Anything raised by the operation or the classifier,
                unchanged and without retrying
        """
        attempt = 1
        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise CancelledError(
                    f"Cancelled before attempt {attempt}",
                    attempt=attempt,
                    operation=_operation_name(operation),
                )

            try:
                result = operation()
            except Exception as e:
                logger.debug(f"Attempt {attempt} raised {type(e).__name__}, not retrying: {e}")
                raise

            decision = self.decide(result, attempt)
            if not decision.should_retry:
                if decision.exhausted:
                    self._log_exhausted(result)
                return result

            self._before_wait(attempt, result, decision.delay)
            if cancel_event is None:
                self._sleep(decision.delay)
            elif cancel_event.wait(decision.delay):
                raise CancelledError(
                    f"Cancelled while waiting after attempt {attempt}",
                    attempt=attempt,
                    operation=_operation_name(operation),
                )
            attempt += 1

    async def execute_async(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Run an asynchronous operation under the policy.

        Cancelling the surrounding task interrupts either the in-flight
        attempt or the wait, and asyncio.CancelledError reaches the caller.

        Args:
            operation: Zero-argument callable returning an awaitable attempt

        Returns:
            The last result produced, whether terminal or exhausted
        """
        attempt = 1
        while True:
            try:
                result = await operation()
            except asyncio.CancelledError:
                logger.debug(f"Attempt {attempt} cancelled")
                raise
            except Exception as e:
                logger.debug(f"Attempt {attempt} raised {type(e).__name__}, not retrying: {e}")
                raise

            decision = self.decide(result, attempt)
            if not decision.should_retry:
                if decision.exhausted:
                    self._log_exhausted(result)
                return result

            self._before_wait(attempt, result, decision.delay)
            try:
                await self._async_sleep(decision.delay)
            except asyncio.CancelledError:
                logger.debug(f"Cancelled while waiting after attempt {attempt}")
                raise
            attempt += 1

    def _before_wait(self, attempt: int, result: Any, delay: float) -> None:
        if self._on_retry:
            self._on_retry(attempt, result, delay)
        else:
            logger.warning(
                f"Retry {attempt}/{self._max_retries}: {_describe(result)}, "
                f"waiting {delay:.1f}s"
            )

    def _log_exhausted(self, result: Any) -> None:
        logger.error(
            f"All {self._max_retries} retries exhausted, returning last result ({_describe(result)})"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(retry_on={self._classifier!r}, "
            f"max_retries={self._max_retries}, delay={self._delay!r})"
        )
