"""Logging initialization."""

import logging

from .config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "") -> None:
    # HTTP client libraries log every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.basicConfig(level=level or get_log_level(), format=LOG_FORMAT)


__all__ = ["configure_logging"]
