"""Retry-with-backoff helpers."""

from retry_backoff.backoff import (
    DEFAULT_WAIT_US,
    backoff_on_condition,
    backoff_on_exception,
    backoff_on_exception_condition,
    next_wait,
)
from retry_backoff.config import RetrySettings
from retry_backoff.decorators import (
    retry_on_condition,
    retry_on_exception,
    retry_on_exception_condition,
)
from retry_backoff.mixin import BackoffMixin

__all__ = [
    "DEFAULT_WAIT_US",
    "BackoffMixin",
    "RetrySettings",
    "backoff_on_condition",
    "backoff_on_exception",
    "backoff_on_exception_condition",
    "next_wait",
    "retry_on_condition",
    "retry_on_exception",
    "retry_on_exception_condition",
]
