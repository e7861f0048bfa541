"""Roll and advance dates over a business-day calendar.

Both functions only rely on ``calendar.is_holiday`` (and the derived
``is_last_business_day_of_month``) plus pure date arithmetic, so they work
with any :class:`bizcal.calendars.base.Calendar`.
"""

from datetime import date
from typing import Callable, Optional, Union

from bizcal.core.dates import (
    Period,
    TimeUnit,
    end_of_month,
    next_day,
    plus,
    previous_day,
    require_date,
)
from bizcal.core.errors import CalendarInconsistencyError, UnknownConventionError
from bizcal.core.logger import get_logger
from bizcal.engine.conventions import RollingConvention

logger = get_logger("engine.rolling")

DEFAULT_MAX_SEARCH_DAYS = 366


def _walk(calendar, d: date, step: Callable[[date], date]) -> date:
    limit = getattr(calendar, "max_search_days", DEFAULT_MAX_SEARCH_DAYS)
    start = d
    steps = 0
    while calendar.is_holiday(d):
        steps += 1
        if steps > limit:
            logger.error(
                "%s: no business day within %d days of %s", calendar, limit, start
            )
            raise CalendarInconsistencyError(
                f"{calendar}: no business day within {limit} days of {start}"
            )
        d = step(d)
    return d


def walk_forward(calendar, d: date) -> date:
    """First business day on or after ``d``."""
    return _walk(calendar, d, next_day)


def walk_backward(calendar, d: date) -> date:
    """Last business day on or before ``d``."""
    return _walk(calendar, d, previous_day)


def roll(
    calendar,
    d: date,
    convention: Union[RollingConvention, str] = RollingConvention.FOLLOWING,
    origin: Optional[date] = None,
) -> date:
    """Adjust ``d`` to a business day of ``calendar`` under ``convention``.

    Business days are returned unchanged. Modified conventions never leave the
    month of ``d``: when the walk crosses a month boundary the opposite
    direction is used instead. MONTH_END_REFERENCE additionally keeps dates
    aligned to month end when ``origin`` was the last business day of its
    month.

    Raises:
        InvalidDateError: ``d`` is None.
        UnknownConventionError: ``convention`` is not a RollingConvention.
        CalendarInconsistencyError: no business day within the search bound.
    """
    d = require_date(d, "roll")
    convention = RollingConvention.coerce(convention)
    if origin is not None:
        origin = require_date(origin, "roll origin")

    if convention == RollingConvention.UNADJUSTED:
        return d

    if convention.is_forward:
        d1 = walk_forward(calendar, d)
        if convention == RollingConvention.FOLLOWING:
            return d1
        if d1.month != d.month:
            logger.debug("%s: %s rolled out of month, using Preceding", calendar, d)
            return roll(calendar, d, RollingConvention.PRECEDING)
        if convention == RollingConvention.MONTH_END_REFERENCE and origin is not None:
            if calendar.is_last_business_day_of_month(
                origin
            ) and not calendar.is_last_business_day_of_month(d1):
                logger.debug(
                    "%s: origin %s is month end, aligning %s to month end",
                    calendar,
                    origin,
                    d1,
                )
                return roll(calendar, end_of_month(d1), RollingConvention.PRECEDING)
        return d1

    if convention.is_backward:
        d1 = walk_backward(calendar, d)
        if convention == RollingConvention.MODIFIED_PRECEDING and d1.month != d.month:
            logger.debug("%s: %s rolled out of month, using Following", calendar, d)
            return roll(calendar, d, RollingConvention.FOLLOWING)
        return d1

    raise UnknownConventionError(f"Unknown rolling convention: {convention!r}")


def advance(
    calendar,
    d: date,
    n: Union[int, Period],
    unit: Optional[TimeUnit] = None,
    convention: Union[RollingConvention, str] = RollingConvention.FOLLOWING,
) -> date:
    """Move ``d`` by ``n`` units and adjust the result to a business day.

    ``n`` may also be a :class:`Period`, in which case ``unit`` must be left
    out. Day steps count business days; other units use plain calendar
    arithmetic followed by :func:`roll` with ``origin=d``.
    """
    d = require_date(d, "advance")
    convention = RollingConvention.coerce(convention)
    if isinstance(n, Period):
        if unit is not None:
            raise ValueError("unit must not be given together with a Period")
        n, unit = n.length, n.unit
    elif unit is None:
        unit = TimeUnit.DAYS
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"n must be an integer, got {n!r}")

    if n == 0:
        return roll(calendar, d, convention)

    if unit == TimeUnit.DAYS:
        d1 = d
        if n > 0:
            for _ in range(n):
                d1 = walk_forward(calendar, next_day(d1))
        else:
            for _ in range(-n):
                d1 = walk_backward(calendar, previous_day(d1))
        return d1

    d1 = plus(d, n, unit)
    return roll(calendar, d1, convention, origin=d)


def advance_period(
    calendar,
    d: date,
    period: Period,
    convention: Union[RollingConvention, str] = RollingConvention.FOLLOWING,
) -> date:
    return advance(calendar, d, period.length, period.unit, convention)
