"""
Retry settings — defaults shared by the decorators.

Values come from the environment (or a .env file):

    RETRY_ATTEMPTS         maximum invocations per call (default: 3)
    RETRY_INITIAL_WAIT_US  microseconds before the first retry (default: 1000)
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from retry_backoff.backoff import DEFAULT_WAIT_US

DEFAULT_ATTEMPTS = 3


class RetrySettings(BaseModel):
    """Default attempt budget and initial wait."""
    attempts: int = Field(
        default=DEFAULT_ATTEMPTS,
        ge=1,
        description="Maximum number of invocations, first try included"
    )
    initial_wait_us: int = Field(
        default=DEFAULT_WAIT_US,
        ge=0,
        description="Microseconds to wait before the first retry"
    )

    @classmethod
    def from_env(cls) -> "RetrySettings":
        """
        Build settings from RETRY_ATTEMPTS / RETRY_INITIAL_WAIT_US.

        Unset variables fall back to the field defaults. Invalid values
        raise pydantic.ValidationError.
        """
        load_dotenv()
        values = {}
        attempts = os.environ.get("RETRY_ATTEMPTS")
        if attempts:
            values["attempts"] = attempts
        initial_wait = os.environ.get("RETRY_INITIAL_WAIT_US")
        if initial_wait:
            values["initial_wait_us"] = initial_wait
        return cls(**values)
