"""
Transient Faults - Wait-and-Retry Policies.

Retry operations whose results are classified as transient, with pure backoff
functions and an immutable, shareable policy.
"""

from .exceptions import (
    ResilienceError,
    ConfigurationError,
    OperationError,
    CancelledError,
)
from .retry import (
    DEFAULT_RETRYABLE_STATUS_CODES,
    RetryConfig,
    RetryDecision,
    RetryPolicy,
    RetryStrategy,
    StatusCodeClassifier,
    async_with_retry,
    calculate_backoff,
    is_transient_status,
    linear_backoff,
    with_retry,
)
from .services import FaultProneService

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ResilienceError",
    "ConfigurationError",
    "OperationError",
    "CancelledError",
    # Retry
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "RetryConfig",
    "RetryDecision",
    "RetryPolicy",
    "RetryStrategy",
    "StatusCodeClassifier",
    "async_with_retry",
    "calculate_backoff",
    "is_transient_status",
    "linear_backoff",
    "with_retry",
    # Services
    "FaultProneService",
]
