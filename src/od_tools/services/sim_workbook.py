"""Read-only cell access over a protection sim workbook."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from od_tools.cells import EMPTY, CellValue, column_index
from od_tools.utils.exceptions import (
    CellValueError,
    SheetNotFoundError,
    SimFileNotFoundError,
    WorkbookDecodeError,
)
from od_tools.utils.logging import get_logger

if TYPE_CHECKING:
    from od_tools.services.hour_stepper import HourContext

logger = get_logger(__name__)


class SimWorkbook:
    """Typed, 1-based cell reads over an openpyxl workbook.

    The workbook is treated as immutable: nothing here writes to it.
    """

    def __init__(self, workbook: Workbook, source: str | None = None) -> None:
        self._workbook = workbook
        self._source = source
        self._sheets: dict[str, Worksheet] = {}
        self._extents: dict[str, tuple[int, int]] = {}

    @classmethod
    def open(cls, file_path: Path) -> SimWorkbook:
        """Load a sim workbook (``.xlsx``/``.xlsm``) from disk.

        Formula cells resolve to the values cached by the last Excel save.

        Raises:
            SimFileNotFoundError: If the file does not exist.
            WorkbookDecodeError: If the container cannot be decoded.
        """
        if not file_path.exists():
            raise SimFileNotFoundError(str(file_path))

        try:
            workbook = load_workbook(
                filename=file_path, data_only=True, read_only=False
            )
        except (InvalidFileException, BadZipFile, KeyError, OSError, ValueError) as e:
            raise WorkbookDecodeError(str(file_path), str(e)) from e

        logger.info(
            "Opened sim workbook",
            path=file_path,
            sheets=len(workbook.sheetnames),
        )
        return cls(workbook, source=str(file_path))

    @classmethod
    def from_workbook(cls, workbook: Workbook) -> SimWorkbook:
        """Wrap an already loaded (or in-memory) workbook."""
        return cls(workbook)

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def sheet_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    def read(self, sheet: str, column: int, row: int) -> CellValue:
        """Read the cell at 1-based ``column``/``row`` of ``sheet``.

        Cells outside the populated extent of the sheet read as EMPTY.

        Raises:
            SheetNotFoundError: If the workbook has no sheet named ``sheet``.
        """
        worksheet = self._worksheet(sheet)
        max_row, max_column = self._extents[sheet]
        if row < 1 or column < 1:
            return EMPTY
        if row > max_row or column > max_column:
            return EMPTY
        return CellValue.from_raw(worksheet.cell(row=row, column=column).value)

    def cell(self, sheet: str, letters: str, row: int) -> CellValue:
        """Read a cell addressed by column letters, e.g. ``("Magic", "Y", 4)``."""
        return self.read(sheet, column_index(letters), row)

    def read_by_hour(self, sheet: str, letters: str, hour: HourContext) -> CellValue:
        """Read column ``letters`` on the data row of ``hour``."""
        return self.cell(sheet, letters, hour.data_row)

    def number(self, sheet: str, letters: str, row: int) -> int | float | None:
        """Read a numeric cell; EMPTY reads as None.

        Raises:
            CellValueError: If the cell holds text or a date.
        """
        value = self.cell(sheet, letters, row)
        if value.is_empty:
            return None
        if not value.is_numeric:
            raise CellValueError(sheet, f"{letters}{row}", "a number", value.value)
        number: int | float = value.value
        return number

    def count(self, sheet: str, letters: str, row: int) -> int | float:
        """Read a count cell where EMPTY means zero."""
        number = self.number(sheet, letters, row)
        return 0 if number is None else number

    def _worksheet(self, sheet: str) -> Worksheet:
        worksheet = self._sheets.get(sheet)
        if worksheet is None:
            if sheet not in self._workbook.sheetnames:
                raise SheetNotFoundError(sheet, available=self.sheet_names)
            worksheet = self._workbook[sheet]
            self._sheets[sheet] = worksheet
            # openpyxl scans every cell for max_row/max_column
            self._extents[sheet] = (worksheet.max_row, worksheet.max_column)
        return worksheet
