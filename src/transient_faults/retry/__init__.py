"""
Transient Faults - Retry Logic.

Wait-and-retry policies that classify returned results and back off between attempts.
"""

from .config import DEFAULT_RETRYABLE_STATUS_CODES, RetryConfig, RetryStrategy
from .backoff import (
    calculate_backoff,
    constant_backoff,
    exponential_backoff,
    linear_backoff,
)
from .classifiers import OutcomeClassifier, StatusCodeClassifier, is_transient_status
from .policy import RetryDecision, RetryPolicy
from .decorators import async_with_retry, with_retry

__all__ = [
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "RetryConfig",
    "RetryStrategy",
    "calculate_backoff",
    "constant_backoff",
    "exponential_backoff",
    "linear_backoff",
    "OutcomeClassifier",
    "StatusCodeClassifier",
    "is_transient_status",
    "RetryDecision",
    "RetryPolicy",
    "with_retry",
    "async_with_retry",
]
