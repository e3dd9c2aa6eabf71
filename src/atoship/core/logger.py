"""Logging configuration and setup."""

import json
import logging
import os
import sys
import traceback
from datetime import datetime, timezone
from typing import Optional, Union

# Get log level from environment
LOG_LEVEL = os.getenv("ATOSHIP_LOG_LEVEL", "WARNING").upper()

ROOT_LOGGER_NAME = "atoship"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON (UTC)."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        # Add extra fields if present
        for field in ("request_id", "method", "path", "status_code", "attempt", "elapsed_ms"):
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data, default=str)


# Library logger stays silent unless the application configures handlers
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a JSON stdout handler to the SDK logger (idempotent)."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(level)

    # Skip if already configured
    if not any(getattr(h, "_atoship_json", False) for h in root.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(JSONFormatter())
        console_handler._atoship_json = True
        root.addHandler(console_handler)

    return root


def setup_logger(name: str) -> logging.Logger:
    """Get logger for a module."""
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
