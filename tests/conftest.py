"""Shared test fixtures for calendar engine tests."""

from datetime import date

import pytest

from bizcal.calendars.base import Calendar
from bizcal.calendars.basic import HolidayListCalendar, WeekendsOnly
from bizcal.calendars.western import TARGET, London


class AlwaysHoliday(Calendar):
    """Pathological calendar without business days."""

    def is_holiday(self, d: date) -> bool:
        return True


@pytest.fixture
def weekends() -> WeekendsOnly:
    return WeekendsOnly()


@pytest.fixture
def target() -> TARGET:
    return TARGET()


@pytest.fixture
def london() -> London:
    return London()


@pytest.fixture
def leap_day_closed() -> HolidayListCalendar:
    """Weekends plus 2024-02-29 as a holiday."""
    return HolidayListCalendar([date(2024, 2, 29)], name="leap_day_closed")


@pytest.fixture
def always_holiday() -> AlwaysHoliday:
    return AlwaysHoliday(max_search_days=10)
