"""Tests for advancing dates by business days and calendar periods."""

from datetime import date

import pytest

from bizcal.core.dates import Period, TimeUnit
from bizcal.core.errors import InvalidDateError, UnknownConventionError
from bizcal.engine.conventions import RollingConvention
from bizcal.engine.rolling import advance, advance_period, roll

F = RollingConvention.FOLLOWING
MF = RollingConvention.MODIFIED_FOLLOWING
MER = RollingConvention.MONTH_END_REFERENCE


class TestAdvanceDays:
    def test_one_day_over_weekend(self, weekends):
        # Friday -> Monday
        assert advance(weekends, date(2024, 1, 5), 1, TimeUnit.DAYS) == date(2024, 1, 8)

    def test_backwards_over_weekend(self, weekends):
        assert advance(weekends, date(2024, 1, 8), -1, TimeUnit.DAYS) == date(
            2024, 1, 5
        )

    def test_from_holiday_counts_first_business_day(self, weekends):
        assert advance(weekends, date(2024, 1, 6), 1, TimeUnit.DAYS) == date(2024, 1, 8)

    def test_unit_defaults_to_days(self, weekends):
        assert advance(weekends, date(2024, 1, 2), 5) == date(2024, 1, 9)

    def test_over_easter(self, target):
        assert advance(target, date(2024, 3, 28), 1, TimeUnit.DAYS) == date(2024, 4, 2)
        assert advance(target, date(2024, 4, 2), -1, TimeUnit.DAYS) == date(
            2024, 3, 28
        )

    def test_convention_not_applied_after_day_steps(self, weekends):
        # modified following would pull 2024-07-01 back into June
        assert advance(weekends, date(2024, 6, 28), 1, TimeUnit.DAYS, MF) == date(
            2024, 7, 1
        )

    def test_settlement_style_t_plus_two(self, weekends):
        """T+2: trade on Thursday, settle on Monday."""
        assert advance(weekends, date(2024, 1, 4), 2) == date(2024, 1, 8)


class TestAdvanceZero:
    @pytest.mark.parametrize("unit", list(TimeUnit))
    def test_zero_equals_roll(self, weekends, unit):
        d = date(2024, 6, 30)
        assert advance(weekends, d, 0, unit, MF) == roll(weekends, d, MF)


class TestAdvancePeriods:
    def test_weeks(self, weekends):
        assert advance(weekends, date(2024, 1, 2), 2, TimeUnit.WEEKS) == date(
            2024, 1, 16
        )

    def test_month_end_clamped(self, weekends):
        assert advance(weekends, date(2024, 1, 31), 1, TimeUnit.MONTHS, F) == date(
            2024, 2, 29
        )
        assert advance(weekends, date(2023, 1, 31), 1, TimeUnit.MONTHS, MF) == date(
            2023, 2, 28
        )

    def test_years_from_leap_day(self, weekends):
        assert advance(weekends, date(2024, 2, 29), 1, TimeUnit.YEARS, F) == date(
            2025, 2, 28
        )

    def test_negative_months(self, weekends):
        # 2024-06-30 is a Sunday
        assert advance(weekends, date(2024, 7, 30), -1, TimeUnit.MONTHS, F) == date(
            2024, 7, 1
        )
        assert advance(weekends, date(2024, 7, 30), -1, TimeUnit.MONTHS, MF) == date(
            2024, 6, 28
        )

    def test_month_landing_on_holiday(self, target):
        # 2024-02-29 + 1M = Good Friday; Easter pushes Following into April
        assert advance(target, date(2024, 2, 29), 1, TimeUnit.MONTHS, F) == date(
            2024, 4, 2
        )
        assert advance(target, date(2024, 2, 29), 1, TimeUnit.MONTHS, MF) == date(
            2024, 3, 28
        )


class TestMonthEndPreservation:
    def test_month_end_origin_stays_at_month_end(self, weekends):
        # 2023-02-28 is the last business day of February
        start = date(2023, 2, 28)
        assert advance(weekends, start, 1, TimeUnit.MONTHS, MER) == date(2023, 3, 31)
        assert advance(weekends, start, 1, TimeUnit.MONTHS, MF) == date(2023, 3, 28)

    def test_june_to_july(self, weekends):
        start = date(2024, 6, 28)
        assert advance(weekends, start, 1, TimeUnit.MONTHS, MER) == date(2024, 7, 31)

    def test_january_to_february_with_closed_leap_day(self, leap_day_closed):
        # 2024-01-31 is a business day; the naive date 2024-02-29 is closed
        start = date(2024, 1, 31)
        result = advance(leap_day_closed, start, 1, TimeUnit.MONTHS, MER)
        assert result == date(2024, 2, 28)
        assert leap_day_closed.is_last_business_day_of_month(result)

    def test_non_month_end_origin(self, weekends):
        start = date(2024, 6, 27)
        assert advance(weekends, start, 1, TimeUnit.MONTHS, MER) == date(2024, 7, 29)


class TestAdvanceWithPeriod:
    def test_period_argument(self, weekends):
        result = advance(
            weekends, date(2024, 1, 31), Period(1, TimeUnit.MONTHS), convention=F
        )
        assert result == date(2024, 2, 29)

    def test_advance_period(self, weekends):
        assert advance_period(
            weekends, date(2024, 1, 5), Period.parse("1D"), F
        ) == date(2024, 1, 8)

    def test_period_matches_integer_form(self, target):
        d = date(2024, 2, 29)
        period = Period(1, TimeUnit.MONTHS)
        assert advance_period(target, d, period, MF) == advance(
            target, d, 1, TimeUnit.MONTHS, MF
        )

    def test_period_with_unit_raises(self, weekends):
        with pytest.raises(ValueError, match="unit must not be given"):
            advance(weekends, date(2024, 1, 2), Period(1, TimeUnit.DAYS), TimeUnit.DAYS)

    def test_calendar_method_delegates(self, weekends):
        assert weekends.advance(date(2024, 1, 5), Period(1, TimeUnit.WEEKS)) == date(
            2024, 1, 12
        )


class TestAdvanceErrors:
    def test_null_date_raises(self, weekends):
        with pytest.raises(InvalidDateError):
            advance(weekends, None, 1, TimeUnit.DAYS, F)

    def test_unknown_convention_raises(self, weekends):
        with pytest.raises(UnknownConventionError):
            advance(weekends, date(2024, 1, 2), 1, TimeUnit.MONTHS, "Sideways")

    def test_non_integer_step_raises(self, weekends):
        with pytest.raises(ValueError, match="must be an integer"):
            advance(weekends, date(2024, 1, 2), 1.5, TimeUnit.DAYS)
