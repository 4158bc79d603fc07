"""Utilities package for the sim log tools.

This package provides:
- Centralized exception classes (exceptions.py)
- Structured logging utilities (logging.py)
"""

from od_tools.utils.exceptions import (
    CellValueError,
    ErrorCode,
    LogWriteError,
    ODToolsError,
    SheetNotFoundError,
    SimFileError,
    SimFileNotFoundError,
    SimLayoutError,
    WorkbookDecodeError,
)
from od_tools.utils.logging import (
    LogContext,
    StructuredLogger,
    configure_logging,
    get_logger,
    timed_operation,
)

__all__ = [
    # Exceptions
    "CellValueError",
    "ErrorCode",
    "LogWriteError",
    "ODToolsError",
    "SheetNotFoundError",
    "SimFileError",
    "SimFileNotFoundError",
    "SimLayoutError",
    "WorkbookDecodeError",
    # Logging
    "LogContext",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
    "timed_operation",
]
