"""
Retry decorators.
"""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

from .policy import RetryPolicy

P = ParamSpec("P")
T = TypeVar("T")


def with_retry(
    policy: RetryPolicy | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Args:
        policy: Retry policy (default: RetryPolicy.from_config())

    Returns:
        Decorated function whose calls run through policy.execute
    """
    if policy is None:
        policy = RetryPolicy.from_config()

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return policy.execute(functools.partial(func, *args, **kwargs))

        return wrapper

    return decorator


def async_with_retry(
    policy: RetryPolicy | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        policy: Retry policy (default: RetryPolicy.from_config())

    Returns:
        Decorated async function whose calls run through policy.execute_async
    """
    if policy is None:
        policy = RetryPolicy.from_config()

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await policy.execute_async(functools.partial(func, *args, **kwargs))

        return wrapper

    return decorator
