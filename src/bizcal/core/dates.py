"""Date primitives: time units, periods and calendar arithmetic.

``datetime.date`` is the date type throughout the package and ``None`` is the
null date. Everything here is pure calendar arithmetic with no notion of
holidays; business-day awareness lives in :mod:`bizcal.engine.rolling`.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta

from bizcal.core.errors import InvalidDateError

_PERIOD_RE = re.compile(r"^\s*([+-]?\d+)\s*([DdWwMmYy])\s*$")


class TimeUnit(Enum):
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def from_code(cls, code: str) -> "TimeUnit":
        """Map a single-letter tenor code (D, W, M, Y) to a unit."""
        mapping = {"D": cls.DAYS, "W": cls.WEEKS, "M": cls.MONTHS, "Y": cls.YEARS}
        key = code.strip().upper()
        if key not in mapping:
            raise ValueError(f"Unknown time unit code: {code}")
        return mapping[key]

    @property
    def code(self) -> str:
        return self.value[0].upper()


@dataclass(frozen=True)
class Period:
    """Signed length of a time unit, e.g. ``Period(6, TimeUnit.MONTHS)``."""

    length: int
    unit: TimeUnit

    def __post_init__(self):
        if not isinstance(self.unit, TimeUnit):
            raise ValueError(f"unit must be a TimeUnit, got {self.unit!r}")
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"length must be an integer, got {self.length!r}")

    @classmethod
    def parse(cls, text: str) -> "Period":
        """Parse tenor strings such as '1D', '2W', '6M', '-1Y'."""
        match = _PERIOD_RE.match(text)
        if match is None:
            raise ValueError(f"Invalid period string: {text!r}")
        return cls(int(match.group(1)), TimeUnit.from_code(match.group(2)))

    def __neg__(self) -> "Period":
        return Period(-self.length, self.unit)

    def __mul__(self, factor: int) -> "Period":
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Period(self.length * factor, self.unit)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.length}{self.unit.code}"


def require_date(d: Optional[date], context: str = "date") -> date:
    """Reject the null date and normalise datetimes (incl. pandas Timestamps)."""
    if d is None:
        raise InvalidDateError(f"{context}: null date")
    if isinstance(d, datetime):
        return d.date()
    if not isinstance(d, date):
        raise InvalidDateError(f"{context}: expected a date, got {type(d).__name__}")
    return d


def next_day(d: date) -> date:
    return d + timedelta(days=1)


def previous_day(d: date) -> date:
    return d - timedelta(days=1)


def last_day_of_month(d: date) -> int:
    """Day number of the last calendar day in the month of ``d``."""
    return calendar.monthrange(d.year, d.month)[1]


def end_of_month(d: date) -> date:
    return d.replace(day=last_day_of_month(d))


def is_end_of_month(d: date) -> bool:
    return d.day == last_day_of_month(d)


def day_of_year(d: date) -> int:
    """1-based day of year, numbered like spreadsheet serial dates.

    Serial-date numbering treats 1900 as a leap year, so every day after
    February 1900 is shifted by one. The Easter Monday table is built on this
    numbering.
    """
    doy = d.timetuple().tm_yday
    if d.year == 1900 and d.month > 2:
        doy += 1
    return doy


def plus(d: date, n: int, unit: TimeUnit) -> date:
    """Add ``n`` units to ``d`` with no holiday awareness.

    Months and years clamp the day to the end of the target month, so
    Jan 31 + 1M is the last day of February and Feb 29 + 1Y is Feb 28.
    """
    d = require_date(d, "plus")
    if unit == TimeUnit.DAYS:
        return d + timedelta(days=n)
    if unit == TimeUnit.WEEKS:
        return d + timedelta(weeks=n)
    if unit == TimeUnit.MONTHS:
        return d + relativedelta(months=n)
    if unit == TimeUnit.YEARS:
        return d + relativedelta(years=n)
    raise ValueError(f"Unknown time unit: {unit!r}")


def add_period(d: date, period: Period) -> date:
    return plus(d, period.length, period.unit)
