"""Structured JSON logging configuration.

Configures Python stdlib logging to emit one JSON object per record on stdout,
with ``severity``, ``timestamp`` and ``logger`` field names.

Usage:
    from slack_command.logging_config import configure_logging
    configure_logging()
"""

import logging
import logging.config

from slack_command.config import Settings, get_settings


def build_logging_config(settings: Settings) -> dict:
    """Return a ``dictConfig`` mapping for the given settings."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
                "rename_fields": {
                    "levelname": "severity",
                    "asctime": "timestamp",
                    "name": "logger",
                },
                "static_fields": {
                    "service": settings.service_name,
                    "environment": settings.environment,
                },
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": settings.log_level.upper(),
            "handlers": ["console"],
        },
    }


def configure_logging(settings: Settings | None = None) -> None:
    """Apply structured JSON logging configuration.

    Call once when the hosting process starts. Falls back to the cached
    settings from :func:`get_settings` when none are given.
    """
    logging.config.dictConfig(build_logging_config(settings or get_settings()))
