"""Structured JSON Logging Configuration.

All logs are output in JSON format for easy parsing. Every record carries the
onboarding session id of the current context so validation and submission
logs for one session can be correlated.
"""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger import jsonlogger

from ..utils.generators import generate_session_id
from .config import settings

session_id_var: ContextVar[str] = ContextVar('session_id', default='no-session-id')


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that includes session_id and standard fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['session_id'] = session_id_var.get()

        log_record['file'] = record.filename
        log_record['line'] = record.lineno
        log_record['function'] = record.funcName


def setup_logging(level: str | None = None) -> logging.Logger:
    """Setup structured JSON logging on the root logger.

    Args:
        level: Log level name (defaults to settings.LOG_LEVEL)

    Returns:
        The configured root logger
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper())

    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(
        CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s', timestamp=True)
    )
    logger.addHandler(handler)

    logger.info(
        "Logging configured",
        extra={
            'log_level': logging.getLevelName(log_level),
            'environment': settings.ENVIRONMENT
        }
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_session_id(session_id: str | None = None) -> str:
    """Set the onboarding session ID for the current context.

    Args:
        session_id: Session ID to set (generates one if not provided)

    Returns:
        The session ID now in effect
    """
    if session_id is None:
        session_id = generate_session_id()
    session_id_var.set(session_id)
    return session_id


def get_session_id() -> str:
    """Get the current onboarding session ID."""
    return session_id_var.get()
