from __future__ import annotations

import logging
from logging.config import dictConfig

from settings import get_settings

CONTEXT_KEYS = ("source", "path", "led", "mode", "text", "value", "reason")

# Display text is quoted so trailing padding stays visible.
_QUOTED_KEYS = frozenset({"text"})


class ContextualFormatter(logging.Formatter):
    """Appends ``key=value`` pairs for any context passed through ``extra=``."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context: list[str] = []
        for key in CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value is None:
                continue
            context.append(f"{key}={value!r}" if key in _QUOTED_KEYS else f"{key}={value}")
        if not context:
            return message
        return f"{message} | {' '.join(context)}"


def configure_logging(level: str | int | None = None) -> None:
    log_level = level if level is not None else get_settings().log_level
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "logging_config.ContextualFormatter",
                    "fmt": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "contextual",
                }
            },
            "root": {"handlers": ["stderr"], "level": log_level},
        }
    )
