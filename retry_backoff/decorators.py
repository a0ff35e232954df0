"""
Retry Decorators — wrap a function once instead of at every call site

    @retry_on_exception(attempts=5, exception_types=(ConnectionError,))
    def fetch(url):
        ...

Omitted `attempts` / `wait` fall back to RetrySettings.from_env(), read when
the decorator is applied.
"""

from functools import wraps

from retry_backoff.backoff import (
    backoff_on_condition,
    backoff_on_exception,
    backoff_on_exception_condition,
)
from retry_backoff.config import RetrySettings


def _resolve(attempts, wait):
    if attempts is not None and wait is not None:
        return attempts, wait
    settings = RetrySettings.from_env()
    return (
        settings.attempts if attempts is None else attempts,
        settings.initial_wait_us if wait is None else wait,
    )


def retry_on_exception(attempts: int | None = None, exception_types=(), wait: int | None = None):
    """Retry the decorated function when it raises one of `exception_types` (any if empty)."""
    attempts, wait = _resolve(attempts, wait)

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return backoff_on_exception(func, args, attempts, exception_types, wait, kwargs)
        return wrapper
    return decorator


def retry_on_condition(condition, attempts: int | None = None, wait: int | None = None):
    """Retry the decorated function until `condition(result)` is True."""
    attempts, wait = _resolve(attempts, wait)

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return backoff_on_condition(func, args, attempts, condition, wait, kwargs)
        return wrapper
    return decorator


def retry_on_exception_condition(condition, attempts: int | None = None, wait: int | None = None):
    """Retry the decorated function while `condition(exception)` approves what it raised."""
    attempts, wait = _resolve(attempts, wait)

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return backoff_on_exception_condition(func, args, attempts, condition, wait, kwargs)
        return wrapper
    return decorator
