"""Easter Monday lookup for the Western calendar family."""

from datetime import date, timedelta

from bizcal.core.errors import EasterTableRangeError

FIRST_YEAR = 1900
LAST_YEAR = 2099

# Day of year of Easter Monday, 1900-2099, serial-date numbering
# (1900 counted as a leap year, see bizcal.core.dates.day_of_year).
EASTER_MONDAY = (
    107,  98,  90, 103,  95, 114, 106,  91, 111, 102,   # 1900-1909
     87, 107,  99,  83, 103,  95, 115,  99,  91, 111,   # 1910-1919
     96,  87, 107,  92, 112, 103,  95, 108, 100,  91,   # 1920-1929
    111,  96,  88, 107,  92, 112, 104,  88, 108, 100,   # 1930-1939
     85, 104,  96, 116, 101,  92, 112,  97,  89, 108,   # 1940-1949
    100,  85, 105,  96, 109, 101,  93, 112,  97,  89,   # 1950-1959
    109,  93, 113, 105,  90, 109, 101,  86, 106,  97,   # 1960-1969
     89, 102,  94, 113, 105,  90, 110, 101,  86, 106,   # 1970-1979
     98, 110, 102,  94, 114,  98,  90, 110,  95,  86,   # 1980-1989
    106,  91, 111, 102,  94, 107,  99,  90, 103,  95,   # 1990-1999
    115, 106,  91, 111, 103,  87, 107,  99,  84, 103,   # 2000-2009
     95, 115, 100,  91, 111,  96,  88, 107,  92, 112,   # 2010-2019
    104,  95, 108, 100,  92, 111,  96,  88, 108,  92,   # 2020-2029
    112, 104,  89, 108, 100,  85, 105,  96, 116, 101,   # 2030-2039
     93, 112,  97,  89, 109, 100,  85, 105,  97, 109,   # 2040-2049
    101,  93, 113,  97,  89, 109,  94, 113, 105,  90,   # 2050-2059
    110, 101,  86, 106,  98,  89, 102,  94, 114, 105,   # 2060-2069
     90, 110, 102,  86, 106,  98, 111, 102,  94, 107,   # 2070-2079
     99,  90, 110,  95,  87, 106,  91, 111, 103,  94,   # 2080-2089
    107,  99,  91, 103,  95, 115, 107,  91, 111, 103,   # 2090-2099
)


def easter_monday(year: int) -> int:
    """Day of year of Easter Monday for ``year`` in [1900, 2099].

    Raises EasterTableRangeError outside the table instead of clamping.
    """
    if not FIRST_YEAR <= year <= LAST_YEAR:
        raise EasterTableRangeError(
            f"Easter Monday table covers {FIRST_YEAR}-{LAST_YEAR}, got {year}"
        )
    return EASTER_MONDAY[year - FIRST_YEAR]


def easter_monday_date(year: int) -> date:
    doy = easter_monday(year)
    if year == 1900:
        # undo the phantom Feb 29 of serial-date numbering
        doy -= 1
    return date(year, 1, 1) + timedelta(days=doy - 1)


def good_friday_date(year: int) -> date:
    return easter_monday_date(year) - timedelta(days=3)
