"""
Structured Logging Utilities

Configures the root logger and provides request-scoped context for log
messages, improving observability and debugging.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional
from contextvars import ContextVar

from constants import LogConfig


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


def configure_logging(level: str = LogConfig.LEVEL, log_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Attach console (and optionally rotating file) handlers to the root logger.

    Calling this again replaces the handlers it installed previously.

    Args:
        level: Logging level name
        log_dir: Directory for the rotating log file; None logs to stdout only

    Returns:
        Path of the log file, or None when logging to stdout only
    """
    log_formatter = logging.Formatter(LogConfig.FORMAT)

    reset_logging()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler._user_records_handler = True
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LogConfig.FILE_NAME

        # File handler with rotation (10MB per file, keep 5 backups)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LogConfig.MAX_BYTES,
            backupCount=LogConfig.BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler._user_records_handler = True
        root_logger.addHandler(file_handler)

    return log_file


def reset_logging():
    """Detach and close the handlers installed by configure_logging."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, '_user_records_handler', False):
            root_logger.removeHandler(handler)
            handler.close()


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Request completed", extra={
            "status_code": response.status_code,
            "path": request.url.path
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request.

    This context will be automatically included in all StructuredLogger
    messages within the current context.

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(request_id="abc-123", path="/api/v1/users")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})
