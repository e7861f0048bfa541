"""Western calendars: holidays partly anchored on Easter Monday."""

from datetime import date

from bizcal.calendars.base import Calendar
from bizcal.calendars.easter import easter_monday as _easter_monday
from bizcal.core.dates import day_of_year

MONDAY = 0
TUESDAY = 1
SATURDAY = 5
SUNDAY = 6


class WesternCalendar(Calendar):
    """Base for calendars whose movable feasts follow Western Easter.

    Valid for 1900-2099, the range of the Easter Monday table.
    """

    @staticmethod
    def easter_monday(year: int) -> int:
        return _easter_monday(year)

    @staticmethod
    def is_weekend(d: date) -> bool:
        return d.weekday() in (SATURDAY, SUNDAY)

    def is_easter_monday(self, d: date) -> bool:
        return day_of_year(d) == self.easter_monday(d.year)

    def is_good_friday(self, d: date) -> bool:
        return day_of_year(d) == self.easter_monday(d.year) - 3


class TARGET(WesternCalendar):
    """TARGET (euro settlement) calendar."""

    def __init__(self, **kwargs):
        kwargs.setdefault("name", "TARGET")
        super().__init__(**kwargs)

    def is_holiday(self, d: date) -> bool:
        y, m, day = d.year, d.month, d.day
        if self.is_weekend(d):
            return True
        if m == 1 and day == 1:
            return True
        if y >= 2000 and (self.is_good_friday(d) or self.is_easter_monday(d)):
            return True
        if y >= 2000 and m == 5 and day == 1:
            return True
        if m == 12 and day == 25:
            return True
        if y >= 2000 and m == 12 and day == 26:
            return True
        # Dec 31st closing in 1998, 1999 and 2001 only
        if m == 12 and day == 31 and y in (1998, 1999, 2001):
            return True
        return False


class London(WesternCalendar):
    """London bank holidays (general rules, no one-off royal events)."""

    def __init__(self, **kwargs):
        kwargs.setdefault("name", "London")
        super().__init__(**kwargs)

    def is_holiday(self, d: date) -> bool:
        m, day, w = d.month, d.day, d.weekday()
        if self.is_weekend(d):
            return True
        # New Year's Day, moved to Monday when on a weekend
        if m == 1 and (day == 1 or (day in (2, 3) and w == MONDAY)):
            return True
        if self.is_good_friday(d) or self.is_easter_monday(d):
            return True
        # early May, spring and summer bank holidays
        if m == 5 and w == MONDAY and (day <= 7 or day >= 25):
            return True
        if m == 8 and w == MONDAY and day >= 25:
            return True
        # Christmas and Boxing Day, moved when on a weekend
        if m == 12 and (day == 25 or (day == 27 and w in (MONDAY, TUESDAY))):
            return True
        if m == 12 and (day == 26 or (day == 28 and w in (MONDAY, TUESDAY))):
            return True
        return False
