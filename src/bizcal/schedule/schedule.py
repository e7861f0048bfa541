"""Payment schedules of adjusted dates."""

from datetime import date
from typing import Iterator, List, Optional, Union

import pandas as pd

from bizcal.calendars.base import Calendar
from bizcal.core.dates import Period, end_of_month, is_end_of_month, plus, require_date
from bizcal.core.logger import get_logger
from bizcal.engine.conventions import RollingConvention
from bizcal.engine.rolling import roll, walk_backward

logger = get_logger("schedule")


class Schedule:
    """Dates from ``effective`` to ``termination`` stepped by ``tenor``.

    Unadjusted dates are generated forward from the effective date, each one
    as ``effective + k * tenor`` so month-end clamping never accumulates. When
    the tenor does not divide the interval the last period is a short stub.
    Every date is then rolled on ``calendar`` with ``convention``. With
    ``end_of_month`` and an effective date at month end (calendar or last
    business day), intermediate dates stay on the last business day of their
    month instead.
    """

    def __init__(
        self,
        effective: date,
        termination: date,
        tenor: Period,
        calendar: Calendar,
        convention: Union[RollingConvention, str] = RollingConvention.MODIFIED_FOLLOWING,
        termination_convention: Optional[Union[RollingConvention, str]] = None,
        end_of_month: bool = False,
    ):
        effective = require_date(effective, "Schedule effective")
        termination = require_date(termination, "Schedule termination")
        if effective >= termination:
            raise ValueError("effective date must be before termination date")
        if tenor.length <= 0:
            raise ValueError("tenor must be positive")

        self.effective = effective
        self.termination = termination
        self.tenor = tenor
        self.calendar = calendar
        self.convention = RollingConvention.coerce(convention)
        self.termination_convention = (
            RollingConvention.coerce(termination_convention)
            if termination_convention is not None
            else self.convention
        )
        self.end_of_month = end_of_month

        self.unadjusted_dates = self._generate()
        self.dates = self._adjust(self.unadjusted_dates)
        logger.debug(
            "Schedule %s -> %s every %s on %s: %d dates",
            effective,
            termination,
            tenor,
            calendar,
            len(self.dates),
        )

    def _generate(self) -> List[date]:
        dates = [self.effective]
        k = 1
        while True:
            d = plus(self.effective, k * self.tenor.length, self.tenor.unit)
            if d >= self.termination:
                break
            dates.append(d)
            k += 1
        dates.append(self.termination)
        return dates

    def _month_end_anchor(self) -> Optional[date]:
        """Last business day of the effective month when the schedule is month-end anchored."""
        if not self.end_of_month:
            return None
        if is_end_of_month(self.effective) or self.calendar.is_last_business_day_of_month(
            self.effective
        ):
            return walk_backward(self.calendar, end_of_month(self.effective))
        return None

    def _adjust(self, unadjusted: List[date]) -> List[date]:
        anchor = self._month_end_anchor()
        adjusted = [roll(self.calendar, unadjusted[0], self.convention)]
        for d in unadjusted[1:-1]:
            if anchor is not None:
                adjusted.append(
                    roll(
                        self.calendar,
                        d,
                        RollingConvention.MONTH_END_REFERENCE,
                        origin=anchor,
                    )
                )
            else:
                adjusted.append(roll(self.calendar, d, self.convention))
        adjusted.append(roll(self.calendar, unadjusted[-1], self.termination_convention))
        return adjusted

    def is_regular(self, i: int) -> bool:
        """Whether period ``i`` (ending at ``dates[i]``, 1-based) has full tenor length."""
        if not 1 <= i < len(self.unadjusted_dates):
            raise IndexError(f"period index out of range: {i}")
        expected = plus(self.effective, i * self.tenor.length, self.tenor.unit)
        return self.unadjusted_dates[i] == expected

    def to_index(self) -> pd.DatetimeIndex:
        return pd.DatetimeIndex(pd.to_datetime(self.dates), name="date")

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "unadjusted": pd.to_datetime(self.unadjusted_dates),
                "adjusted": pd.to_datetime(self.dates),
            }
        )

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)

    def __getitem__(self, i: int) -> date:
        return self.dates[i]


def make_schedule(
    effective: date,
    termination: date,
    tenor: Union[Period, str],
    calendar: Calendar,
    convention: Union[RollingConvention, str] = RollingConvention.MODIFIED_FOLLOWING,
    termination_convention: Optional[Union[RollingConvention, str]] = None,
    end_of_month: bool = False,
) -> Schedule:
    """Build a Schedule, accepting tenor strings such as '6M'."""
    if isinstance(tenor, str):
        tenor = Period.parse(tenor)
    return Schedule(
        effective,
        termination,
        tenor,
        calendar,
        convention=convention,
        termination_convention=termination_convention,
        end_of_month=end_of_month,
    )
