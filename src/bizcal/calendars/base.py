"""Abstract business-day calendar."""

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from bizcal.core.dates import Period, TimeUnit, next_day, require_date
from bizcal.engine import rolling
from bizcal.engine.conventions import RollingConvention


class Calendar(ABC):
    """Business-day calendar defined by a single holiday predicate.

    Subclasses implement :meth:`is_holiday`; every other query is derived
    from it.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        max_search_days: int = rolling.DEFAULT_MAX_SEARCH_DAYS,
    ):
        if max_search_days <= 0:
            raise ValueError("max_search_days must be positive")
        self.name = name or type(self).__name__
        self.max_search_days = max_search_days

    @abstractmethod
    def is_holiday(self, d: date) -> bool: ...

    def is_business_day(self, d: date) -> bool:
        return not self.is_holiday(d)

    def is_last_business_day_of_month(self, d: date) -> bool:
        """True if ``d`` is a business day and the next one is in another month."""
        if self.is_holiday(d):
            return False
        return rolling.walk_forward(self, next_day(d)).month != d.month

    def roll(
        self,
        d: date,
        convention: Union[RollingConvention, str] = RollingConvention.FOLLOWING,
        origin: Optional[date] = None,
    ) -> date:
        return rolling.roll(self, d, convention, origin)

    def advance(
        self,
        d: date,
        n: Union[int, Period],
        unit: Optional[TimeUnit] = None,
        convention: Union[RollingConvention, str] = RollingConvention.FOLLOWING,
    ) -> date:
        return rolling.advance(self, d, n, unit, convention)

    def business_days_between(
        self,
        start: date,
        end: date,
        include_first: bool = True,
        include_last: bool = False,
    ) -> int:
        """Count business days between two dates; negative if end < start."""
        start = require_date(start, "business_days_between")
        end = require_date(end, "business_days_between")
        if start > end:
            return -self.business_days_between(end, start, include_last, include_first)
        count = 0
        current = start
        while current <= end:
            if self.is_business_day(current):
                if (current != start or include_first) and (
                    current != end or include_last
                ):
                    count += 1
            current += timedelta(days=1)
        return count

    def holiday_list(
        self, start: date, end: date, include_weekends: bool = True
    ) -> List[date]:
        """Holidays in [start, end] inclusive."""
        start = require_date(start, "holiday_list")
        end = require_date(end, "holiday_list")
        holidays = []
        current = start
        while current <= end:
            if self.is_holiday(current) and (
                include_weekends or current.weekday() < 5
            ):
                holidays.append(current)
            current += timedelta(days=1)
        return holidays

    def holiday_mask(self, dates: Iterable) -> np.ndarray:
        """Boolean array flagging holidays, e.g. over a ``pd.DatetimeIndex``."""
        values = [pd.Timestamp(d).date() for d in dates]
        return np.fromiter(
            (self.is_holiday(d) for d in values), dtype=bool, count=len(values)
        )

    def __str__(self) -> str:
        return getattr(self, "name", type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={str(self)!r})"
