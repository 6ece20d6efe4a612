"""Logging configuration."""

import json
import logging
import sys
from datetime import datetime
from typing import Any

from subscription_schedule.config import Settings

PACKAGE_LOGGER = "subscription_schedule"

# Attributes passed through ``extra`` by the subscription model
SCHEDULE_FIELDS = ("interval", "start_date", "frequency", "residue")


class JsonFormatter(logging.Formatter):
    """JSON log formatter that carries the subscription fields of a record."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        subscription = {
            field: getattr(record, field) for field in SCHEDULE_FIELDS if hasattr(record, field)
        }
        if subscription:
            log_record["subscription"] = subscription

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    The package only installs a NullHandler on import; applications that want
    schedule logs on stdout call this once at startup.

    Args:
        settings: Application settings

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)

    if settings.environment == "production":
        console_handler.setFormatter(JsonFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logger.addHandler(console_handler)
    # Records are already written by the handler above
    logger.propagate = False
    return logger
