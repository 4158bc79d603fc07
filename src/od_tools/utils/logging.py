"""Structured logging utilities for the sim log tools.

This module provides:
- Hour/sim context tracking using contextvars
- Structured logging with consistent format and metadata
- Performance metrics logging helpers

Usage:
    from od_tools.utils.logging import get_logger, LogContext

    logger = get_logger(__name__)

    with LogContext(sim="sim.xlsm", hour=5):
        logger.info("Extracting hour")

    with timed_operation(logger, "generate_log") as metrics:
        metrics.hours_processed += 1
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_extra_context_var: ContextVar[dict[str, Any] | None] = ContextVar(
    "extra_context", default=None
)


def get_extra_context() -> dict[str, Any]:
    """Get additional context from context vars.

    Returns:
        Dictionary of extra context values.
    """
    ctx = _extra_context_var.get()
    return ctx if ctx is not None else {}


def set_extra_context(context: dict[str, Any]) -> None:
    """Set additional context in context vars.

    Args:
        context: Dictionary of extra context values.
    """
    _extra_context_var.set(context)


@dataclass
class PerformanceMetrics:
    """Container for performance metrics of a generation run.

    Attributes:
        operation: Name of the operation being measured.
        start_time: When the operation started.
        end_time: When the operation ended.
        duration_seconds: Duration in seconds.
        hours_processed: Number of sim hours extracted.
        hours_reported: Number of hours that produced a log block.
        custom_metrics: Additional custom metrics.
    """

    operation: str
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None
    duration_seconds: float = 0.0
    hours_processed: int = 0
    hours_reported: int = 0
    custom_metrics: dict[str, Any] = field(default_factory=dict)

    def finish(self) -> None:
        """Mark the operation as complete and calculate duration."""
        self.end_time = datetime.now(UTC)
        self.duration_seconds = (self.end_time - self.start_time).total_seconds()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging, skipping zero counters."""
        result: dict[str, Any] = {
            "operation": self.operation,
            "duration_seconds": self.duration_seconds,
        }
        if self.hours_processed > 0:
            result["hours_processed"] = self.hours_processed
        if self.hours_reported > 0:
            result["hours_reported"] = self.hours_reported
        if self.custom_metrics:
            result["custom_metrics"] = self.custom_metrics
        return result


class StructuredLogFormatter(logging.Formatter):
    """Log formatter that prefixes messages with the active LogContext."""

    def format(self, record: logging.LogRecord) -> str:
        prefix_parts = [f"{key}={value}" for key, value in get_extra_context().items()]
        prefix = f"[{' '.join(prefix_parts)}] " if prefix_parts else ""

        original_msg = record.msg
        record.msg = f"{prefix}{original_msg}"
        result = super().format(record)
        record.msg = original_msg

        return result


class StructuredLogger:
    """Thin wrapper over a standard logger that renders key=value pairs."""

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)
        self._name = name

    def _build_message(
        self,
        message: str,
        **kwargs: Any,
    ) -> str:
        if not kwargs:
            return message

        parts = [f"{k}={v}" for k, v in kwargs.items()]
        return f"{message} | {', '.join(parts)}"

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._build_message(message, **kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._build_message(message, **kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._build_message(message, **kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._build_message(message, **kwargs))

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(self._build_message(message, **kwargs))

    def log_performance(self, metrics: PerformanceMetrics) -> None:
        self.info(
            f"Performance: {metrics.operation}",
            **metrics.to_dict(),
        )


class LogContext:
    """Context manager for adding temporary context to logs.

    Usage:
        with LogContext(hour=12):
            logger.info("Reading draft rate")  # prefixed with [hour=12]
    """

    def __init__(self, **kwargs: Any) -> None:
        self._new_context = kwargs
        self._old_context: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self._old_context = get_extra_context().copy()
        merged = self._old_context.copy()
        merged.update(self._new_context)
        set_extra_context(merged)
        return self

    def __exit__(self, *args: Any) -> None:
        set_extra_context(self._old_context)


@contextmanager
def timed_operation(
    logger: StructuredLogger,
    operation: str,
) -> Generator[PerformanceMetrics, None, None]:
    """Context manager for timing operations.

    Usage:
        with timed_operation(logger, "generate_log") as metrics:
            metrics.hours_processed = 73

        # Logs: "Performance: generate_log | operation=..., duration_seconds=..."

    Args:
        logger: Logger to use for output.
        operation: Name of the operation.

    Yields:
        PerformanceMetrics instance for tracking.
    """
    metrics = PerformanceMetrics(operation=operation)
    try:
        yield metrics
    finally:
        metrics.finish()
        logger.log_performance(metrics)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure logging for the application.

    Diagnostics go to stderr so a log printed to stdout stays clean.

    Args:
        level: Log level (int or string like "INFO").
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(StructuredLogFormatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for a module.

    Example:
        logger = get_logger(__name__)
        logger.info("Opened sim", sheets=10)
    """
    return StructuredLogger(name)
