"""Error taxonomy for calendar and date adjustment failures."""


class CalendarError(Exception):
    pass


class InvalidDateError(CalendarError, ValueError):
    """A null (None) date was passed where a date is required."""


class UnknownConventionError(CalendarError, ValueError):
    pass


class EasterTableRangeError(CalendarError, IndexError):
    """Year outside the range covered by the Easter Monday table."""


class CalendarInconsistencyError(CalendarError, RuntimeError):
    """A holiday walk found no business day within the search bound."""
