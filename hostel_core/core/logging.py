"""
Logging for the occupancy core

Logger adapters carrying per-service context, plus the one-shot
setup routine that installs handlers and optional structlog processors.
"""

import logging
import logging.config
from typing import Optional

import structlog

from hostel_core.config.logging import build_logging_config
from hostel_core.config.settings import Settings, get_settings


class LoggerAdapter:
    """Wraps a stdlib logger and merges bound context into every record"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self._context = {}

    def add_context(self, **kwargs):
        """Bind fields that are attached to every later record"""
        self._context.update(kwargs)
        return self

    def _log(self, level: int, message: str, *args, **kwargs):
        """Emit with bound fields merged into ``extra``"""
        extra = dict(kwargs.get('extra') or {})
        extra.update(self._context)
        kwargs['extra'] = extra

        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs):
        self._log(logging.CRITICAL, message, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    """
    Logger for a module of the core.

    Args:
        name: Logger name (defaults to the package logger)

    Returns:
        LoggerAdapter around ``logging.getLogger(name)``
    """
    return LoggerAdapter(logging.getLogger(name or 'hostel_core'))


def configure_structured_logging(settings: Settings) -> None:
    """Configure structured logging with structlog"""
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.processors.KeyValueRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Install handlers for the given settings; call once at process start"""
    settings = settings or get_settings()

    logging.config.dictConfig(build_logging_config(settings))
    if settings.ENABLE_STRUCTURED_LOGGING:
        configure_structured_logging(settings)

    get_logger(__name__).info(
        "Logging system initialized",
        extra={
            'log_level': settings.LOG_LEVEL,
            'log_format': settings.LOG_FORMAT,
            'structured_logging': settings.ENABLE_STRUCTURED_LOGGING,
        },
    )


__all__ = [
    'get_logger',
    'setup_logging',
    'configure_structured_logging',
    'LoggerAdapter',
]
