# gadgetbox/utils/logging.py
"""Logging setup with optional JSON output.

Provides:
- JSON-formatted log output for structured logging
- Gadget/operation context passed through ``extra=``
- Centralized logger configuration
"""

import json
import logging
from typing import Any

from gadgetbox.config import settings

# Attributes copied from ``extra=`` into structured output.
CONTEXT_FIELDS = ("gadget", "operation", "path")

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON with timestamp, level, logger name,
    message, and any gadget context attached to the record.
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

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = str(value)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def configure_logging(
    level: int | str | None = None, json_output: bool | None = None
) -> None:
    """Configure logging for the ``gadgetbox`` logger tree.

    Replaces handlers installed by a previous call, so calling it twice does
    not duplicate output.

    Args:
        level: Logging level or level name. Defaults to settings.log_level.
        json_output: Emit JSON lines instead of plain text. Defaults to
            settings.log_json.
    """
    if level is None:
        level = settings.log_level
    if json_output is None:
        json_output = settings.log_json

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logger = logging.getLogger("gadgetbox")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
