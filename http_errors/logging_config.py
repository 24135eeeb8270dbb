"""Console logging for the demo server in :mod:`http_errors.web`."""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Send every record at ``level`` or above to ``stream``.

    Unknown level names fall back to INFO. ``stream`` defaults to stdout.
    Calling this again replaces the handlers installed by a previous call.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=stream or sys.stdout,
        force=True,
    )
