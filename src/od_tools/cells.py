"""Typed cell values and spreadsheet column addressing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from functools import lru_cache
from typing import Any


class CellKind(str, Enum):
    """Kinds of values a sim cell can hold."""

    EMPTY = "empty"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    DATETIME = "datetime"


@dataclass(frozen=True)
class CellValue:
    """A single cell read from the sim, tagged with its kind.

    Blank and whitespace-only text is normalized to EMPTY so extractors never
    special-case whitespace.
    """

    kind: CellKind
    value: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> CellValue:
        """Build a CellValue from whatever openpyxl returned for a cell."""
        if raw is None:
            return EMPTY
        # bool is a subclass of int; TRUE/FALSE cells behave as 1/0 flags
        if isinstance(raw, bool):
            return cls(CellKind.INTEGER, int(raw))
        if isinstance(raw, int):
            return cls(CellKind.INTEGER, raw)
        if isinstance(raw, float):
            return cls(CellKind.FLOAT, raw)
        if isinstance(raw, (datetime, time)):
            return cls(CellKind.DATETIME, raw)
        if isinstance(raw, date):
            return cls(CellKind.DATETIME, datetime.combine(raw, time()))
        text = str(raw).strip()
        if not text:
            return EMPTY
        return cls(CellKind.TEXT, text)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    @property
    def is_numeric(self) -> bool:
        return self.kind in (CellKind.INTEGER, CellKind.FLOAT)

    @property
    def is_blank_or_zero(self) -> bool:
        """True when the cell signals that nothing happened."""
        return self.is_empty or (self.is_numeric and self.value == 0)

    def __str__(self) -> str:
        if self.kind is CellKind.EMPTY:
            return ""
        if self.kind is CellKind.FLOAT:
            return format_number(self.value)
        if self.kind is CellKind.DATETIME:
            if isinstance(self.value, time):
                return self.value.strftime("%H:%M:%S")
            return self.value.strftime("%Y-%m-%d %H:%M:%S")
        return str(self.value)


EMPTY = CellValue(CellKind.EMPTY)


def format_number(value: int | float) -> str:
    """Render a number for a narrative sentence.

    Formula results often come back as integral floats; those print without
    the trailing ``.0``.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@lru_cache(maxsize=256)
def column_index(letters: str) -> int:
    """Convert spreadsheet column letters to a 1-based column index.

    Columns use bijective base 26: ``A`` is 1, ``Z`` is 26 and ``AA`` is 27.
    Letters are case-insensitive.

    Raises:
        ValueError: If ``letters`` is empty or contains a non A-Z character.
    """
    if not letters:
        raise ValueError("Column letters must not be empty")

    index = 0
    for char in letters.upper():
        if not "A" <= char <= "Z":
            raise ValueError(f"Invalid column letters: {letters!r}")
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index
