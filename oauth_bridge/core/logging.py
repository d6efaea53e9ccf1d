"""
Logging setup for the bridge process.

Everything goes to stdout in one pipe-separated format so uvicorn and
application records read the same in container logs.
"""

import logging
import sys

# httpx logs every request line at INFO, including the token endpoint URL.
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging and quiet the HTTP client loggers."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["configure_logging"]
