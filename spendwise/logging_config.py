"""Structured JSON logging for spendwise.

Logs go to stderr so command output on stdout stays readable.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger.json import JsonFormatter


class SpendwiseJsonFormatter(JsonFormatter):
    """JSON formatter with timestamp and service metadata."""

    def add_fields(self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "spendwise"


def setup_logging(level: str = "WARNING") -> None:
    """Configure structured JSON logging on the root logger.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO").
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(SpendwiseJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)
