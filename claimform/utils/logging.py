"""Structured logging setup for the claim submission form."""

import contextvars
import functools
import logging
from typing import Optional, Dict, Any
from pathlib import Path


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(context)s] %(message)s"


class ContextFilter(logging.Filter):
    """
    Add context information to log records.

    Context lives in a ContextVar, so each thread (one per Streamlit
    session) and each call wrapped by ``with_context`` sees only its own
    fields.
    """

    def __init__(self):
        super().__init__()
        self._context: contextvars.ContextVar = contextvars.ContextVar("log_context", default=None)

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context.get() or {})

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Add context fields to log record.

        Each field becomes a record attribute, and ``record.context`` holds
        them rendered as ``key=value`` pairs so format strings can use
        ``%(context)s`` without knowing which keys are set.
        """
        context = self.context
        for key, value in context.items():
            setattr(record, key, value)
        record.context = " ".join(f"{k}={v}" for k, v in context.items())
        return True

    def set_context(self, **kwargs) -> contextvars.Token:
        """Set context fields for logging; returns a token for ``reset``."""
        return self._context.set({**self.context, **kwargs})

    def reset(self, token: contextvars.Token):
        """Restore the context that was active before ``set_context``."""
        self._context.reset(token)

    def clear_context(self):
        """Clear all context fields."""
        self._context.set({})


# Global context filter instance
_context_filter = ContextFilter()


def setup_logging(
    level: str = "INFO",
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up structured logging with optional file output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format string for log messages
        log_file: Optional path to log file

    Returns:
        Configured root logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Streamlit reruns the script; avoid stacking handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(_context_filter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(_context_filter)
        root_logger.addHandler(file_handler)

    return root_logger


def setup_logging_from_config(logging_config) -> logging.Logger:
    """
    Set up logging from a LoggingConfig section.

    Args:
        logging_config: ``Config.logging`` instance

    Returns:
        Configured root logger
    """
    return setup_logging(
        level=logging_config.level,
        log_format=logging_config.format,
        log_file=logging_config.file or None,
    )


def set_context(**kwargs):
    """
    Set context fields for all subsequent log messages.

    Example:
        set_context(submission_id="SUB-1A2B3C4D")
        logger.info("Validating claim")  # Record carries submission_id

    Args:
        **kwargs: Context key-value pairs
    """
    _context_filter.set_context(**kwargs)


def clear_context():
    """Clear all context fields."""
    _context_filter.clear_context()


def current_context() -> Dict[str, Any]:
    """Return a copy of the active context fields."""
    return _context_filter.context


def with_context(**context_kwargs):
    """
    Decorator to add context to all log messages within a function.

    The previous context is restored when the function returns or raises,
    including any fields the function itself set.

    Example:
        @with_context(component="validator")
        def validate(submission, now):
            logger.info("Validating")  # Includes component

    Args:
        **context_kwargs: Context key-value pairs
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            token = _context_filter.set_context(**context_kwargs)
            try:
                return func(*args, **kwargs)
            finally:
                _context_filter.reset(token)

        return wrapper
    return decorator
