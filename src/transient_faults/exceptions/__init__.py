"""
Transient Faults - Exception Hierarchy.

Custom exceptions for policy construction, operation failures and cancellation.
"""

from .base import (
    ResilienceError,
    ConfigurationError,
    OperationError,
    CancelledError,
)

__all__ = [
    "ResilienceError",
    "ConfigurationError",
    "OperationError",
    "CancelledError",
]
