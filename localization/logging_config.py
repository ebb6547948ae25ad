"""
Structured Logging

JSON-formatted log records stamped with the active request locale, for log
aggregation systems like ELK Stack, Loki, or CloudWatch.
"""

import json
import logging
from datetime import datetime, timezone

from localization.context import get_active_locale


class LocaleFilter(logging.Filter):
    """Logging filter to add the active locale to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.locale = get_active_locale("")
        return True


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    extra_fields = ("method", "path", "host", "host_locale", "status_code")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "locale": getattr(record, "locale", ""),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in self.extra_fields:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, ensure_ascii=False)


def setup_structured_logging(
    log_level: str = "INFO",
    json_format: bool = True,
    log_file: str | None = None,
) -> logging.Handler:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatter (True for production)
        log_file: Optional file path for log output

    Returns:
        The handler installed on the root logger.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    root_logger.handlers.clear()

    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()

    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - [%(locale)s] %(message)s"))

    handler.addFilter(LocaleFilter())

    root_logger.addHandler(handler)

    loggers_config = {
        "localization": log_level,
        "uvicorn": "WARNING",
        "uvicorn.access": "WARNING",
    }

    for logger_name, level in loggers_config.items():
        logging.getLogger(logger_name).setLevel(getattr(logging, level.upper()))

    return handler
