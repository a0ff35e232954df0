"""
Scripted demo showing all three backoff policies.

Usage:
    python -m scripts.demo
"""

from dotenv import load_dotenv
load_dotenv()

from retry_backoff import (
    backoff_on_condition,
    backoff_on_exception,
    backoff_on_exception_condition,
)
from retry_backoff.logging_config import setup_logging


class FlakyService:
    """Fails (or returns nothing) a fixed number of times, then succeeds."""

    def __init__(self, failures: int):
        self.failures = failures
        self.calls = 0

    def fetch(self, key: str) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError(f"service unavailable (call {self.calls})")
        return f"value for {key}"

    def poll(self, key: str) -> str | None:
        self.calls += 1
        if self.calls <= self.failures:
            return None
        return f"ready: {key}"


class ServiceError(Exception):
    def __init__(self, code: int):
        super().__init__(f"service error {code}")
        self.code = code


def main():
    setup_logging()

    print("\n" + "=" * 60)
    print("  DEMO: Retry with Exponential Backoff")
    print("=" * 60)

    # Demo 1: retry on exception
    print("\n\n--- DEMO 1: Retry on ConnectionError ---")
    service = FlakyService(failures=2)
    result = backoff_on_exception(service.fetch, ["user:42"], 5, [ConnectionError])
    print(f"Result: {result} (after {service.calls} calls)")

    # Demo 2: retry until the result is accepted
    print("\n\n--- DEMO 2: Poll until a result arrives ---")
    service = FlakyService(failures=3)
    result = backoff_on_condition(
        service.poll, ["report-7"], 5, lambda r: r is not None
    )
    print(f"Result: {result} (after {service.calls} calls)")

    # Demo 3: retry only on selected error codes
    print("\n\n--- DEMO 3: Retry on error code 503 only ---")
    calls = []

    def unstable():
        calls.append(1)
        raise ServiceError(503 if len(calls) < 3 else 404)

    try:
        backoff_on_exception_condition(
            unstable, [], 5, lambda e: isinstance(e, ServiceError) and e.code == 503
        )
    except ServiceError as e:
        print(f"Gave up with code {e.code} after {len(calls)} calls")


if __name__ == "__main__":
    main()
