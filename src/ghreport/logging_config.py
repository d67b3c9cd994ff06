"""
Logging configuration with secret redaction
"""

import logging
import logging.config
from typing import Any, Dict, Set

REDACTED = "**********"

_secrets: Set[str] = set()


def register_secret(value: str) -> None:
    """Mask ``value`` in every record that passes through the redaction filter."""
    if value:
        _secrets.add(value)


def clear_secrets() -> None:
    _secrets.clear()


def redact(text: str) -> str:
    """Replace every registered secret in ``text``."""
    for secret in _secrets:
        text = text.replace(secret, REDACTED)
    return text


class SecretRedactionFilter(logging.Filter):
    """Filter that replaces registered secret values in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not _secrets:
            return True
        message = record.getMessage()
        redacted = redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True  # never drop, only rewrite


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration for the job."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "secret_redaction": {
                "()": SecretRedactionFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["secret_redaction"]
            }
        },
        "loggers": {
            "ghreport": {
                "handlers": ["default"],
                "level": level.upper(),
                "propagate": False
            },
            "botocore": {
                "level": "WARNING"
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the job's logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
