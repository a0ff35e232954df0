"""
Backoff Executor — Retry an Operation with Exponential Backoff

Three policies share one delay schedule:

- backoff_on_exception: retry when the operation raises (optionally only
  for specific exception classes)
- backoff_on_condition: retry while the result is not accepted
- backoff_on_exception_condition: retry while a predicate approves the
  raised exception

Waits are in microseconds. The first retry waits `wait` (default 1000us),
every following retry waits twice as long as the previous one.
"""

import logging
import time
from collections.abc import Callable, Collection, Mapping, Sequence
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_WAIT_US = 1000
MIN_WAIT_US = 1000


def next_wait(wait: int) -> int:
    """Return the wait (us) to use before the retry after this one."""
    if wait == 0:
        return MIN_WAIT_US
    return wait * 2


def _sleep_us(wait: int) -> None:
    time.sleep(wait / 1_000_000)


def _check_arguments(attempts: int, wait: int) -> None:
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got {attempts}")
    if wait < 0:
        raise ValueError(f"wait must be non-negative, got {wait}")


def _name(operation: Callable) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)


def backoff_on_exception(
    operation: Callable[..., T],
    args: Sequence[Any],
    attempts: int,
    exception_types: Collection[type[BaseException]] = (),
    wait: int = DEFAULT_WAIT_US,
    kwargs: Mapping[str, Any] | None = None,
) -> T:
    """
    Invoke `operation` up to `attempts` times, backing off when it raises.

    Args:
        operation: Callable to execute.
        args: Positional arguments passed to every invocation.
        attempts: Maximum number of invocations (first try included).
        exception_types: Exception classes to retry on. Matching is on the
            exact class of the raised exception. Empty means retry on any
            exception.
        wait: Microseconds to wait before the first retry.
        kwargs: Keyword arguments passed to every invocation.

    Raises whatever the last invocation raised when the exception is not
    retryable or no attempts remain.
    """
    _check_arguments(attempts, wait)
    kwargs = kwargs or {}
    total = attempts

    while True:
        try:
            return operation(*args, **kwargs)
        except Exception as e:
            retryable = not exception_types or type(e) in exception_types
            if attempts > 1 and retryable:
                logger.warning(
                    "Retry %d/%d for %s after error: %s. Waiting %dus",
                    total - attempts + 1, total - 1, _name(operation), e, wait,
                )
                _sleep_us(wait)
                attempts -= 1
                wait = next_wait(wait)
                continue
            if retryable and attempts == 1 and total > 1:
                logger.error(
                    "Giving up on %s after %d attempts: %s",
                    _name(operation), total, e,
                )
            raise


def backoff_on_condition(
    operation: Callable[..., T],
    args: Sequence[Any],
    attempts: int,
    condition: Callable[[T], bool],
    wait: int = DEFAULT_WAIT_US,
    kwargs: Mapping[str, Any] | None = None,
) -> T:
    """
    Invoke `operation` until `condition(result)` returns True or attempts
    run out.

    Only an explicit True accepts a result. Exceptions raised by the
    operation are not retried. When attempts run out the last result is
    returned even if it was never accepted.

    For example:

        backoff_on_condition(fetch_status, [job_id], 5, lambda r: r is not None)
    """
    _check_arguments(attempts, wait)
    kwargs = kwargs or {}
    total = attempts

    while True:
        result = operation(*args, **kwargs)
        if attempts > 1 and condition(result) is not True:
            logger.debug(
                "Result of %s not accepted (attempt %d/%d). Waiting %dus",
                _name(operation), total - attempts + 1, total, wait,
            )
            _sleep_us(wait)
            attempts -= 1
            wait = next_wait(wait)
            continue
        return result


def backoff_on_exception_condition(
    operation: Callable[..., T],
    args: Sequence[Any],
    attempts: int,
    condition: Callable[[Exception], bool],
    wait: int = DEFAULT_WAIT_US,
    kwargs: Mapping[str, Any] | None = None,
) -> T:
    """
    Invoke `operation` up to `attempts` times, backing off when it raises an
    exception for which `condition(exception)` is true.

    The exception is re-raised unchanged once `condition` rejects it or no
    attempts remain.
    """
    _check_arguments(attempts, wait)
    kwargs = kwargs or {}
    total = attempts

    while True:
        try:
            return operation(*args, **kwargs)
        except Exception as e:
            if attempts > 1 and condition(e):
                logger.warning(
                    "Retry %d/%d for %s after error: %s. Waiting %dus",
                    total - attempts + 1, total - 1, _name(operation), e, wait,
                )
                _sleep_us(wait)
                attempts -= 1
                wait = next_wait(wait)
                continue
            if attempts == 1 and total > 1:
                logger.error(
                    "Giving up on %s after %d attempts: %s",
                    _name(operation), total, e,
                )
            raise
