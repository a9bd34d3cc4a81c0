"""Structured logging utilities for spreadsheet-grid.

This module provides:
- Log context tracking using contextvars
- Structured logging with consistent key=value metadata
- A formatter that prefixes the active context to every record

Usage:
    from spreadsheet_grid.utils.logging import get_logger, LogContext

    logger = get_logger(__name__)

    with LogContext(sheet="summary"):
        logger.debug("Expanded columns", from_count=2, to_count=5)
"""

import logging
from contextvars import ContextVar
from typing import Any

_log_context_var: ContextVar[dict[str, Any] | None] = ContextVar(
    "log_context", default=None
)


def get_log_context() -> dict[str, Any]:
    """Get the active log context.

    Returns:
        Dictionary of context values, empty when none is set.
    """
    ctx = _log_context_var.get()
    return ctx if ctx is not None else {}


def set_log_context(context: dict[str, Any]) -> None:
    """Replace the active log context.

    Args:
        context: Dictionary of context values.
    """
    _log_context_var.set(context)


def clear_log_context() -> None:
    """Clear the active log context."""
    _log_context_var.set(None)


class StructuredLogFormatter(logging.Formatter):
    """Log formatter that prefixes the active log context.

    Records logged inside a ``LogContext`` are rendered as
    ``[key=value ...] message``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with context information.

        Args:
            record: The log record to format.

        Returns:
            Formatted log message string.
        """
        context = get_log_context()
        prefix_parts = [f"{key}={value}" for key, value in context.items()]
        prefix = f"[{' '.join(prefix_parts)}] " if prefix_parts else ""

        original_msg = record.msg
        record.msg = f"{prefix}{original_msg}"
        result = super().format(record)
        record.msg = original_msg

        return result


class StructuredLogger:
    """Logger wrapper that appends structured key=value pairs to messages."""

    def __init__(self, name: str) -> None:
        """Initialize the structured logger.

        Args:
            name: Logger name (typically __name__ of the module).
        """
        self._logger = logging.getLogger(name)
        self._name = name

    @property
    def logger(self) -> logging.Logger:
        """Access the underlying Python logger."""
        return self._logger

    def _build_message(
        self,
        message: str,
        **kwargs: Any,
    ) -> str:
        """Build a message with structured key-value pairs.

        Args:
            message: Base message.
            **kwargs: Additional key-value pairs to include.

        Returns:
            Formatted message string.
        """
        if not kwargs:
            return message

        parts = [f"{k}={v}" for k, v in kwargs.items()]
        return f"{message} | {', '.join(parts)}"

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._logger.debug(self._build_message(message, **kwargs))


class LogContext:
    """Context manager for adding temporary context to logs.

    Usage:
        with LogContext(sheet="summary"):
            logger.debug("Serializing...")  # Prefixed with sheet=summary
    """

    def __init__(self, **kwargs: Any) -> None:
        self._new_context = kwargs
        self._old_context: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        """Enter the context, merging new values over the current ones."""
        self._old_context = get_log_context().copy()
        merged = self._old_context.copy()
        merged.update(self._new_context)
        set_log_context(merged)
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit the context, restoring old values."""
        set_log_context(self._old_context)


def configure_logging(
    level: int | str | None = None,
    format_string: str | None = None,
    use_structured_formatter: bool = True,
) -> None:
    """Configure logging for the application.

    Args:
        level: Log level (int or string like "INFO"). Defaults to the
            SPREADSHEET_LOG_LEVEL setting.
        format_string: Custom format string (uses default if None).
        use_structured_formatter: Whether to use the structured formatter.
    """
    if level is None:
        from spreadsheet_grid.config import settings

        level = settings.log_level_int
    elif isinstance(level, str):
        level = getattr(logging, level.upper())

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)

    formatter: logging.Formatter
    if use_structured_formatter:
        formatter = StructuredLogFormatter(format_string)
    else:
        formatter = logging.Formatter(format_string)

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for a module.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance.

    Example:
        logger = get_logger(__name__)
        logger.debug("Expanded rows", from_count=0, to_count=3)
    """
    return StructuredLogger(name)
