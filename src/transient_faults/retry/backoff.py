"""
Backoff delay functions.

Every function here maps a 1-based attempt number to a delay in seconds and
has no side effects, so a policy built on them is reentrant.
"""

from .config import RetryConfig, RetryStrategy


def linear_backoff(attempt: int) -> float:
    """Wait one second per attempt: 1s, 2s, 3s, ..."""
    return float(attempt)


def constant_backoff(attempt: int) -> float:
    return 1.0


def exponential_backoff(attempt: int) -> float:
    """Double the wait on every attempt: 1s, 2s, 4s, ..."""
    return float(2 ** (attempt - 1))


def calculate_backoff(attempt: int, config: RetryConfig) -> float:
    """
    Calculate backoff delay for a given attempt.

    Args:
        attempt: One-based attempt number that just produced a retryable result
        config: Retry configuration

    Returns:
        Delay in seconds, capped at config.max_delay
    """
    if config.strategy == RetryStrategy.EXPONENTIAL:
        delay = config.base_delay * (2 ** (attempt - 1))
    elif config.strategy == RetryStrategy.LINEAR:
        delay = config.base_delay * attempt
    else:  # CONSTANT
        delay = config.base_delay

    return max(0.0, min(delay, config.max_delay))
