"""Centralized exception classes for the sim log tools.

This module provides a hierarchy of custom exceptions with error codes and
structured error details for consistent error handling from the workbook
adapter up to the CLI.

Exception Hierarchy:
    ODToolsError (base)
    ├── SimFileError
    │   ├── SimFileNotFoundError
    │   ├── WorkbookDecodeError
    │   └── LogWriteError
    └── SimLayoutError
        ├── SheetNotFoundError
        └── CellValueError

Error Codes:
    All errors have a unique error code (e.g., "E1001") that can be used
    for programmatic error handling and documentation.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Enumeration of all error codes used in the application.

    Error codes are grouped by category:
    - E1xxx: File/workbook container errors
    - E2xxx: Sim layout errors (template does not match the engine)
    - E9xxx: Internal/unexpected errors
    """

    # File errors (E1xxx)
    FILE_NOT_FOUND = "E1001"
    FILE_READ_ERROR = "E1004"
    FILE_WRITE_ERROR = "E1005"

    # Layout errors (E2xxx)
    SHEET_NOT_FOUND = "E2001"
    UNEXPECTED_CELL_VALUE = "E2002"

    # Internal errors (E9xxx)
    INTERNAL_ERROR = "E9001"


class ODToolsError(Exception):
    """Base exception for all sim log errors.

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code from ErrorCode enum.
        details: Optional dictionary with additional error details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Error code from ErrorCode enum.
            details: Optional additional details about the error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary for structured logging.

        Returns:
            Dictionary with error information.
        """
        result: dict[str, Any] = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code.value}] {self.message}"


# =============================================================================
# File Errors (E1xxx)
# =============================================================================


class SimFileError(ODToolsError):
    """Base class for errors reading the sim or writing the log."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.FILE_READ_ERROR,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with file path information.

        Args:
            message: Error message.
            error_code: Error code.
            file_path: Path to the problematic file.
            details: Additional details.
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, error_code, details)
        self.file_path = file_path


class SimFileNotFoundError(SimFileError):
    """Raised when the sim workbook does not exist."""

    def __init__(
        self,
        file_path: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = message or f"Sim file not found: {file_path}"
        super().__init__(
            message=message,
            error_code=ErrorCode.FILE_NOT_FOUND,
            file_path=file_path,
            details=details,
        )


class WorkbookDecodeError(SimFileError):
    """Raised when the spreadsheet container cannot be decoded."""

    def __init__(
        self,
        file_path: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the decoder's reason.

        Args:
            file_path: Path to the workbook.
            reason: Message from the underlying decoder.
            details: Additional details.
        """
        details = details or {}
        details["reason"] = reason
        super().__init__(
            message=f"Error opening or reading sim file '{file_path}': {reason}",
            error_code=ErrorCode.FILE_READ_ERROR,
            file_path=file_path,
            details=details,
        )
        self.reason = reason


class LogWriteError(SimFileError):
    """Raised when the generated log cannot be written."""

    def __init__(
        self,
        file_path: str,
        reason: str,
    ) -> None:
        super().__init__(
            message=f"Could not write log to '{file_path}': {reason}",
            error_code=ErrorCode.FILE_WRITE_ERROR,
            file_path=file_path,
        )


# =============================================================================
# Layout Errors (E2xxx)
# =============================================================================


class SimLayoutError(ODToolsError):
    """Base class for sims that do not match the expected template."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.SHEET_NOT_FOUND,
        sheet: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the sheet involved.

        Args:
            message: Error message.
            error_code: Error code.
            sheet: Name of the sheet being read.
            details: Additional details.
        """
        details = details or {}
        if sheet:
            details["sheet"] = sheet
        super().__init__(message, error_code, details)
        self.sheet = sheet


class SheetNotFoundError(SimLayoutError):
    """Raised when a required sheet is missing from the workbook."""

    def __init__(self, sheet: str, available: list[str] | None = None) -> None:
        """Initialize with the missing sheet name.

        Args:
            sheet: Name of the sheet that was requested.
            available: Sheet names the workbook does contain.
        """
        details: dict[str, Any] = {}
        if available is not None:
            details["available_sheets"] = available
        super().__init__(
            message=f"Sheet '{sheet}' not found in workbook",
            error_code=ErrorCode.SHEET_NOT_FOUND,
            sheet=sheet,
            details=details,
        )


class CellValueError(SimLayoutError):
    """Raised when a cell holds a value of the wrong shape.

    For example a cost column holding text where a number is expected.
    """

    def __init__(
        self,
        sheet: str,
        cell: str,
        expected: str,
        actual: Any,
    ) -> None:
        """Initialize with the offending cell.

        Args:
            sheet: Sheet name.
            cell: A1-style cell reference.
            expected: Description of the expected value kind.
            actual: The value that was found.
        """
        super().__init__(
            message=(
                f"Expected {expected} in cell '{cell}' of sheet '{sheet}', "
                f"got {actual!r}"
            ),
            error_code=ErrorCode.UNEXPECTED_CELL_VALUE,
            sheet=sheet,
            details={"cell": cell, "expected": expected},
        )
        self.cell = cell
        self.expected = expected
        self.actual = actual
