"""
Logging Configuration

setup_logging() configures the root logger so retry warnings from
retry_backoff.backoff show up alongside the caller's own log output.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | None = None):
    """
    Configure logging at `level`, or the LOG_LEVEL env var (default: INFO).

    Unknown level names fall back to INFO.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    resolved = getattr(logging, level_name, None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
