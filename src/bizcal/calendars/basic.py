"""Calendars that need no movable-feast rules."""

from datetime import date
from enum import Enum
from typing import Iterable, Optional

from bizcal.calendars.base import Calendar
from bizcal.core.dates import require_date

WEEKEND = (5, 6)  # Sat, Sun


class NullCalendar(Calendar):
    """Every day is a business day."""

    def is_holiday(self, d: date) -> bool:
        return False


class WeekendsOnly(Calendar):
    def is_holiday(self, d: date) -> bool:
        return d.weekday() in WEEKEND


class HolidayListCalendar(Calendar):
    """Weekend days plus an explicit list of holidays, optionally on top of a base."""

    def __init__(
        self,
        holidays: Iterable[date] = (),
        weekend: Iterable[int] = WEEKEND,
        base: Optional[Calendar] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        weekend = frozenset(int(w) for w in weekend)
        if any(w < 0 or w > 6 for w in weekend):
            raise ValueError("weekend days must be in 0..6 (Mon=0)")
        self.weekend = weekend
        self.holidays = frozenset(require_date(h, "holiday") for h in holidays)
        self.base = base

    def is_holiday(self, d: date) -> bool:
        if d.weekday() in self.weekend or d in self.holidays:
            return True
        return self.base is not None and self.base.is_holiday(d)


class JointRule(Enum):
    JOIN_HOLIDAYS = "join_holidays"
    JOIN_BUSINESS_DAYS = "join_business_days"


class JointCalendar(Calendar):
    """Combination of calendars.

    JOIN_HOLIDAYS: a holiday in any calendar is a holiday.
    JOIN_BUSINESS_DAYS: a business day in any calendar is a business day.
    """

    def __init__(
        self, *calendars: Calendar, rule: JointRule = JointRule.JOIN_HOLIDAYS, **kwargs
    ):
        if not calendars:
            raise ValueError("JointCalendar needs at least one calendar")
        kwargs.setdefault("name", f"Joint({', '.join(c.name for c in calendars)})")
        super().__init__(**kwargs)
        self.calendars = tuple(calendars)
        self.rule = rule

    def is_holiday(self, d: date) -> bool:
        if self.rule == JointRule.JOIN_HOLIDAYS:
            return any(c.is_holiday(d) for c in self.calendars)
        return all(c.is_holiday(d) for c in self.calendars)
