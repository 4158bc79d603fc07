"""Iteration over protection hours and their sheet rows."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_LAST_HOUR = 73
DEFAULT_HEADER_ROWS = 3


@dataclass(frozen=True)
class HourContext:
    """One protection hour and the sheet row that holds its values."""

    display_hour: int
    data_row: int

    @classmethod
    def for_hour(cls, hour: int, header_rows: int = DEFAULT_HEADER_ROWS) -> HourContext:
        """Build the context for a 1-based hour.

        Raises:
            ValueError: If ``hour`` is below 1.
        """
        if hour < 1:
            raise ValueError(f"Protection hours start at 1, got {hour}")
        return cls(display_hour=hour, data_row=hour + header_rows)

    @property
    def previous_row(self) -> int:
        """Row of the hour before this one (the header row for hour 1)."""
        return self.data_row - 1


def iter_hours(
    hour: int | None = None,
    last_hour: int = DEFAULT_LAST_HOUR,
    header_rows: int = DEFAULT_HEADER_ROWS,
) -> Iterator[HourContext]:
    """Yield the hours to process: a single requested hour, or 1..last_hour.

    A requested hour past ``last_hour`` is still honoured.
    """
    if hour is not None:
        yield HourContext.for_hour(hour, header_rows)
        return

    for hr in range(1, last_hour + 1):
        yield HourContext.for_hour(hr, header_rows)
