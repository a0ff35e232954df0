"""Shared test fixtures for the retry_backoff test suite."""

from unittest.mock import patch

import pytest


class FlakyOperation:
    """Raises `error` for the first `failures` calls, then returns `result`."""

    def __init__(self, failures: int, error: Exception | None = None, result="ok"):
        self.failures = failures
        self.error = error or ValueError("transient error")
        self.result = result
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        if len(self.calls) <= self.failures:
            raise self.error
        return self.result


@pytest.fixture
def mock_sleep():
    with patch("retry_backoff.backoff.time.sleep") as sleep:
        yield sleep


@pytest.fixture
def flaky():
    return FlakyOperation
