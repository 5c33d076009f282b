"""
Retry configuration and strategy definitions.
"""

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet

import httpx

from ..exceptions import ConfigurationError

# Not all HTTP status codes indicate a recoverable error. 4xx codes should not be
# retried without something changing on the client's side; these 5xx codes are
# the ones likely to be transient.
DEFAULT_RETRYABLE_STATUS_CODES: FrozenSet[int] = frozenset(
    {
        httpx.codes.BAD_GATEWAY,
        httpx.codes.GATEWAY_TIMEOUT,
        httpx.codes.INTERNAL_SERVER_ERROR,
        httpx.codes.SERVICE_UNAVAILABLE,
    }
)


class RetryStrategy(str, Enum):
    """Available backoff strategies."""

    LINEAR = "linear"  # delay = base * attempt
    EXPONENTIAL = "exponential"  # delay = base * (2 ** (attempt - 1))
    CONSTANT = "constant"  # delay = base


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_retries: Maximum number of retries after the first attempt (default: 5)
        base_delay: Base delay in seconds (default: 1.0)
        max_delay: Maximum delay cap in seconds (default: 60.0)
        strategy: Backoff strategy to use (default: linear)
        retryable_status_codes: HTTP status codes that trigger retry
    """

    max_retries: int = 5
    base_delay: float = 1.0
    max_delay: float = 60.0
    strategy: RetryStrategy = RetryStrategy.LINEAR
    retryable_status_codes: FrozenSet[int] = field(
        default_factory=lambda: DEFAULT_RETRYABLE_STATUS_CODES
    )

    def __post_init__(self) -> None:
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int):
            raise ConfigurationError(f"max_retries must be an int, got {self.max_retries!r}")
        if self.max_retries < 0:
            raise ConfigurationError(f"max_retries must be >= 0, got {self.max_retries}")
        for name in ("base_delay", "max_delay"):
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, numbers.Real)
                or not math.isfinite(value)
                or value < 0
            ):
                raise ConfigurationError(
                    f"{name} must be a non-negative number of seconds, got {value!r}"
                )
        # Accept any iterable of codes but store it immutably
        object.__setattr__(
            self, "retryable_status_codes", frozenset(self.retryable_status_codes)
        )

    def should_retry(self, status_code: int) -> bool:
        """Check if the given status code should trigger a retry."""
        return status_code in self.retryable_status_codes

    @classmethod
    def incremental(cls) -> "RetryConfig":
        """Preset for incremental backoff: 5 retries waiting 1s, 2s, 3s, 4s, 5s."""
        return cls(
            max_retries=5,
            base_delay=1.0,
            strategy=RetryStrategy.LINEAR,
        )

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """Preset for aggressive retry (more attempts, longer delays)."""
        return cls(
            max_retries=10,
            base_delay=2.0,
            max_delay=120.0,
            strategy=RetryStrategy.EXPONENTIAL,
        )

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Preset for conservative retry (fewer attempts, shorter delays)."""
        return cls(
            max_retries=3,
            base_delay=0.5,
            max_delay=10.0,
        )

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_retries=0)
