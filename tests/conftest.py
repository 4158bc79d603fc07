from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from od_tools import layout
from od_tools.config import Settings
from od_tools.services.actions import ActionContext
from od_tools.services.hour_stepper import HourContext
from od_tools.services.sim_workbook import SimWorkbook

SIM_START = datetime(2024, 1, 15, 13, 0)
DOM_START = datetime(2024, 1, 15, 17, 0)


class SimBuilder:
    """Builds in-memory workbooks laid out like the protection sim."""

    def __init__(self, header_rows: int = 3) -> None:
        self.header_rows = header_rows
        self.workbook = Workbook()
        self.workbook.remove(self.workbook.active)
        for name in layout.SHEETS:
            self.workbook.create_sheet(name)

    def set(self, sheet: str, ref: str, value: Any) -> SimBuilder:
        self.workbook[sheet][ref] = value
        return self

    def set_hour(self, sheet: str, letters: str, hour: int, value: Any) -> SimBuilder:
        return self.set(sheet, f"{letters}{hour + self.header_rows}", value)

    def with_ticks(self, last_hour: int = 73) -> SimBuilder:
        for hour in range(1, last_hour + 1):
            offset = timedelta(hours=hour - 1)
            self.set_hour(layout.IMPS, "BY", hour, SIM_START + offset)
            self.set_hour(layout.IMPS, "BZ", hour, DOM_START + offset)
        return self

    def with_draft_rate_header(self) -> SimBuilder:
        return self.set(layout.MILITARY, f"Z{self.header_rows}", "Draftrate")

    def sim(self) -> SimWorkbook:
        return SimWorkbook.from_workbook(self.workbook)

    def save(self, path: Path) -> Path:
        self.workbook.save(path)
        return path


@pytest.fixture
def sim_builder() -> SimBuilder:
    """Empty sim workbook with every template sheet present."""
    return SimBuilder()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_context(
    test_settings: Settings,
) -> Callable[[SimBuilder, int], ActionContext]:
    """Build the ActionContext for one hour of a builder's workbook."""

    def _make(builder: SimBuilder, hour: int = 1) -> ActionContext:
        return ActionContext(
            sim=builder.sim(),
            hour=HourContext.for_hour(hour),
            settings=test_settings,
        )

    return _make


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Put the root logger back the way pytest configured it."""
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = root_logger.handlers[:]
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
