# scheduler_client/utils/logging.py
"""Structured logging with JSON format.

Provides:
- JSON-formatted log output carrying request context (method, url, status)
- Centralized logger lookup
- Opt-in root logger configuration; nothing is configured on import
"""

import json
import logging
from typing import Any

# Attributes the client attaches to records via ``extra=``
CONTEXT_FIELDS = ("owning_service", "method", "url", "status_code")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON with timestamp, level, logger name and
    message, plus any request context fields present on the record.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value not in (None, ""):
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def configure_structured_logging(level: int = logging.INFO) -> logging.Handler:
    """Configure structured JSON logging for the application.

    Sets up a StreamHandler with StructuredFormatter and applies
    it to the root logger.

    Args:
        level: Logging level (default: logging.INFO).

    Returns:
        The installed handler, so callers can remove it again.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(level)
    return handler
