"""Structured JSON Logging Configuration.

Every record is written as one JSON object carrying the request_id of the
HTTP request or worker job that produced it. Registration payloads pass
through the logs, so the formatter redacts secrets and masks contact details
in every extra field, whatever the call site remembered to do.
"""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger import jsonlogger

from ..utils.generators import generate_request_id
from ..utils.strings import sanitize_log_data
from .config import settings

request_id_var: ContextVar[str] = ContextVar('request_id', default='no-request-id')


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding request_id and source fields, with PII redacted.

    Passwords, confirmation fields and MFA/OTP secrets are replaced by a
    marker; ``email`` and ``phone`` values are masked. Nested dictionaries
    are handled too.
    """

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        # Masking is idempotent, so values masked by the caller are unchanged
        log_record.update(sanitize_log_data(dict(log_record)))

        log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['request_id'] = request_id_var.get()

        log_record['file'] = record.filename
        log_record['line'] = record.lineno
        log_record['function'] = record.funcName


def setup_logging():
    """Route the root logger to stdout as JSON at the configured level."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, settings.LOG_LEVEL))
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, settings.LOG_LEVEL))
    handler.setFormatter(
        CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s', timestamp=True)
    )
    logger.addHandler(handler)

    logger.info(
        "Logging configured",
        extra={
            'log_level': settings.LOG_LEVEL,
            'environment': settings.ENVIRONMENT,
            'app_name': settings.APP_NAME
        }
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    return logging.getLogger(name)


def set_request_id(request_id: str | None = None) -> str:
    """Bind a request ID to the current context (HTTP request or ARQ job).

    Args:
        request_id: Request ID to set (generates one if not provided)

    Returns:
        The request ID now in effect
    """
    if request_id is None:
        request_id = generate_request_id()
    request_id_var.set(request_id)
    return request_id


def get_request_id() -> str:
    return request_id_var.get()
