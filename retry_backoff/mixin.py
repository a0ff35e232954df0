"""
Backoff Mixin — retry helpers for classes

Inherit from BackoffMixin to call the backoff policies as methods, e.g. from
an API client that wraps its own flaky requests:

    class StatusClient(BackoffMixin):
        def status(self, job_id):
            return self.backoff_on_condition(
                self._fetch_status, [job_id], 5, lambda r: r is not None
            )
"""

from retry_backoff import backoff
from retry_backoff.backoff import DEFAULT_WAIT_US


class BackoffMixin:
    """Exposes the module-level backoff policies as instance methods."""

    def backoff_on_exception(self, operation, args, attempts,
                             exception_types=(), wait=DEFAULT_WAIT_US, kwargs=None):
        return backoff.backoff_on_exception(
            operation, args, attempts, exception_types, wait, kwargs
        )

    def backoff_on_condition(self, operation, args, attempts, condition,
                             wait=DEFAULT_WAIT_US, kwargs=None):
        return backoff.backoff_on_condition(
            operation, args, attempts, condition, wait, kwargs
        )

    def backoff_on_exception_condition(self, operation, args, attempts, condition,
                                       wait=DEFAULT_WAIT_US, kwargs=None):
        return backoff.backoff_on_exception_condition(
            operation, args, attempts, condition, wait, kwargs
        )
