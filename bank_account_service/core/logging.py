"""Logging setup for the service loggers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from bank_account_service.core.config import LoggingSettings

ROOT_LOGGER = "bank_account_service"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(settings: LoggingSettings) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER)

    # create_app may run several times in one process (tests)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if settings.json_format else logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.level))
    logger.propagate = False
    return logger


__all__ = ["JSONFormatter", "setup_logging"]
