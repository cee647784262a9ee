"""Logging setup for the menu shell and scripts.

Ledger modules log through ``logging.getLogger(__name__)``; nothing here
is needed to use the ledger as a library.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install a single root handler for bank-ledger.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to WARNING.
    format_type : str
        "standard" for pipe-separated lines, "json" for one object per line.
    stream : TextIO | None
        Destination (default: stderr, keeping stdout for menu output).

    Returns
    -------
    logging.Handler
        The installed handler.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    logging.getLogger("bank_ledger").setLevel(log_level)
    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)
    return handler


class JsonFormatter(logging.Formatter):
    """One JSON object per record, timestamped from the record itself."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)
