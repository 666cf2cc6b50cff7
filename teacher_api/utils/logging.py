"""Logging configuration for the application.

Production logs are single-line key="value" records so the ``extra=``
fields attached by the store and service (model, id, teacher_id, error)
can be grepped; development keeps a readable plain format.
"""

import logging
import logging.config
from typing import Optional

from teacher_api.config import Settings, get_settings

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at the application level
QUIET_LOGGERS = {
    "uvicorn": "WARNING",
    "uvicorn.access": "WARNING",
    "uvicorn.error": "INFO",
    "sqlalchemy.engine": "WARNING",
}


class StructuredFormatter(logging.Formatter):
    """Render a record as key="value" pairs, extra fields included."""

    def format(self, record: logging.LogRecord) -> str:
        fields = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)

        return " ".join(f'{key}="{value}"' for key, value in fields.items())


def build_logging_config(settings: Settings) -> dict:
    """Build the dictConfig mapping for the given settings."""
    formatter = (
        {"()": StructuredFormatter, "datefmt": DATE_FORMAT}
        if settings.is_production
        else {"format": PLAIN_FORMAT, "datefmt": DATE_FORMAT}
    )
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "default",
            }
        },
        "root": {"level": settings.LOG_LEVEL, "handlers": ["console"]},
        "loggers": {name: {"level": level} for name, level in QUIET_LOGGERS.items()},
    }


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure the root logger from settings.

    Args:
        settings: Settings to use, defaults to the cached application settings
    """
    settings = settings or get_settings()
    logging.config.dictConfig(build_logging_config(settings))

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={
            "log_level": settings.LOG_LEVEL,
            "environment": settings.ENVIRONMENT,
        },
    )
