# 📄 File: membership/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up a logging system that records what happens in the membership service in a
# structured way, so registrations, activations and failures are easy to trace later.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), contextual request and
# correlation identifiers carried through contextvars, and a cached StructuredLogger wrapper.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: command/query handlers, repository implementations, notifier adapter

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger import jsonlogger

from membership.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')

# Global logging configuration
_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}

SERVICE_NAME = 'membership-service'


class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter that adds contextual information to log records.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'
        self.service_name = SERVICE_NAME

    def format(self, record):
        record.request_id = request_id_var.get('')
        record.correlation_id = correlation_id_var.get('')
        record.hostname = self.hostname
        record.service = self.service_name
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return super().format(record)


class JSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for structured logging.

    Every record gets the service name, host, request/correlation ids and,
    when present, the ``extra_fields`` mapping attached by StructuredLogger.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('json_ensure_ascii', False)
        super().__init__(
            '%(levelname)s %(name)s %(message)s %(module)s %(funcName)s %(lineno)d',
            *args,
            **kwargs
        )
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = self.hostname

        if request_id_var.get():
            log_record['request_id'] = request_id_var.get()
        if correlation_id_var.get():
            log_record['correlation_id'] = correlation_id_var.get()

        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class StructuredLogger:
    """
    Logger wrapper with structured logging capabilities.

    Keyword arguments other than the standard logging ones are collected
    into ``extra_fields`` so they land as structured data in the JSON output.
    """

    _PASSTHROUGH = ('exc_info', 'stack_info', 'stacklevel')

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Optional[Dict] = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        for key, value in kwargs.items():
            if key not in self._PASSTHROUGH:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items() if k in self._PASSTHROUGH}
        # Point caller info at the code that called info()/warning(), not at _log.
        clean_kwargs.setdefault('stacklevel', 3)

        if extra_fields:
            clean_kwargs['extra'] = {'extra_fields': extra_fields}

        self.logger.log(level, message, **clean_kwargs)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: Optional[Any] = None,
        entity_type: Optional[str] = None,
        extra: Optional[Dict] = None
    ):
        """Log business events for audit and analytics."""
        extra_fields = {
            'event_type': 'business_event',
            'business_event_type': event_type,
            **(extra or {})
        }

        if entity_id is not None:
            extra_fields['entity_id'] = str(entity_id)
        if entity_type:
            extra_fields['entity_type'] = entity_type

        self._log(logging.INFO, description, extra_fields, stacklevel=3)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    force: bool = False
) -> logging.Logger:
    """
    Setup application logging configuration.

    Values not passed explicitly are read from settings. The root logger is
    configured only once unless ``force`` is set.
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DB_ECHO else logging.WARNING
    )
    logging.getLogger('passlib').setLevel(logging.ERROR)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger

    return logger


@contextmanager
def log_context(
    request_id: Optional[str] = None,
    correlation_id: Optional[str] = None
):
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier (generated when omitted)
        correlation_id: Correlation identifier for distributed tracing
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    correlation_token = correlation_id_var.set(correlation_id or '')

    try:
        yield {
            'request_id': request_id,
            'correlation_id': correlation_id
        }
    finally:
        request_id_var.reset(request_token)
        correlation_id_var.reset(correlation_token)
