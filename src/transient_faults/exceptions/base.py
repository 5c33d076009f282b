"""
Base exception classes for retry policy operations.

None of these are retried by the policy: configuration errors fail at
construction, operation errors and cancellation end the loop immediately.
"""


class ResilienceError(Exception):
    """Base exception for all transient-fault handling errors."""

    def __init__(self, message: str, *, operation: str | None = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class ConfigurationError(ResilienceError):
    """Raised when a retry policy is constructed with invalid settings."""

    def __init__(self, message: str = "Invalid retry configuration", **kwargs):
        super().__init__(message, **kwargs)


class OperationError(ResilienceError):
    """Raised when the wrapped operation fails to produce a result. Propagated without retry."""

    def __init__(self, message: str = "Operation failed", **kwargs):
        super().__init__(message, **kwargs)


class CancelledError(ResilienceError):
    """Raised when a retry loop is cancelled before it reaches a result."""

    def __init__(self, message: str = "Retry loop cancelled", attempt: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.attempt = attempt
