"""
Logging configuration for the attendance core.
Plain text for development, JSON lines for production log shipping.
"""

import logging
import logging.config
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

REDACTED = "[REDACTED]"
SENSITIVE_FIELDS = ("token", "secret", "signature", "authorization", "cookie")


class RedactSensitiveFilter(logging.Filter):
    """Masks sensitive values passed through ``extra=``."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in SENSITIVE_FIELDS:
            if hasattr(record, field):
                setattr(record, field, REDACTED)
        return True


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter with stable level/logger keys"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def build_logging_config(level: str = "INFO", fmt: str = "plain") -> Dict[str, Any]:
    formatter = "json" if fmt == "json" else "standard"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "redact": {"()": RedactSensitiveFilter},
        },
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "filters": ["redact"],
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "attendance_core": {
                "level": level.upper(),
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def configure_logging(level: str = "INFO", fmt: str = "plain") -> None:
    logging.config.dictConfig(build_logging_config(level, fmt))
