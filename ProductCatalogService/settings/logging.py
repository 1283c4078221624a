"""
Logging configuration for structured JSON logging.

Every record carries the service name and, when the record was emitted
for a catalog operation, the operation and product id passed via
``extra``.
"""

import os
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "product-catalog"


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter that stamps service context on every record."""

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = SERVICE_NAME
        log_record.setdefault("level", record.levelname)
        for key in ("operation", "product_id"):
            value = getattr(record, key, None)
            if value is not None:
                log_record[key] = str(value)


def get_logging_config(environment: str = "development") -> dict:
    """
    Get logging configuration for the application.

    Args:
        environment: Environment name (development, production, test)

    Returns:
        Django logging configuration dictionary
    """
    default_level = "DEBUG" if environment == "development" else "INFO"
    log_level = os.environ.get("LOG_LEVEL", default_level).upper()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d",
            },
            "simple": {
                "format": "{levelname} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": sys.stdout,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": log_level,
        },
        "loggers": {
            "django": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
            "django.request": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
            "django.db.backends": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
            "core": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": False,
            },
            "api": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": False,
            },
            "products": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": False,
            },
        },
    }
