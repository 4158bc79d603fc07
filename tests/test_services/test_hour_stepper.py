"""Tests for hour iteration."""

import pytest

from od_tools.services.hour_stepper import HourContext, iter_hours


class TestHourContext:
    def test_first_hour_reads_row_four(self) -> None:
        hour = HourContext.for_hour(1)
        assert hour.display_hour == 1
        assert hour.data_row == 4
        assert hour.previous_row == 3

    @pytest.mark.parametrize("hour", [1, 24, 73, 100])
    def test_data_row_is_offset_by_header(self, hour: int) -> None:
        assert HourContext.for_hour(hour).data_row == hour + 3

    def test_custom_header_rows(self) -> None:
        assert HourContext.for_hour(5, header_rows=1).data_row == 6

    def test_hour_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="start at 1"):
            HourContext.for_hour(0)


class TestIterHours:
    def test_all_hours(self) -> None:
        hours = list(iter_hours())
        assert len(hours) == 73
        assert hours[0].display_hour == 1
        assert hours[-1].display_hour == 73
        assert hours[-1].data_row == 76

    def test_single_hour(self) -> None:
        assert list(iter_hours(12)) == [HourContext(display_hour=12, data_row=15)]

    def test_single_hour_beyond_last_hour(self) -> None:
        assert list(iter_hours(80, last_hour=73)) == [
            HourContext(display_hour=80, data_row=83)
        ]

    def test_restartable(self) -> None:
        assert list(iter_hours(last_hour=5)) == list(iter_hours(last_hour=5))

    def test_custom_last_hour(self) -> None:
        assert [h.display_hour for h in iter_hours(last_hour=3)] == [1, 2, 3]
