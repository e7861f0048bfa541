"""Calendar registry and construction from YAML configuration."""

from datetime import date
from typing import Any, Callable, Dict, List

from bizcal.calendars.base import Calendar
from bizcal.calendars.basic import (
    WEEKEND,
    HolidayListCalendar,
    JointCalendar,
    JointRule,
    NullCalendar,
    WeekendsOnly,
)
from bizcal.calendars.western import TARGET, London
from bizcal.core.config import get_setting
from bizcal.core.logger import get_logger
from bizcal.engine.conventions import RollingConvention
from bizcal.engine.rolling import DEFAULT_MAX_SEARCH_DAYS

logger = get_logger("calendars.factory")

_REGISTRY: Dict[str, Callable[..., Calendar]] = {
    "target": TARGET,
    "london": London,
    "nullcalendar": NullCalendar,
    "weekendsonly": WeekendsOnly,
}


def register_calendar(name: str, factory: Callable[..., Calendar]) -> None:
    _REGISTRY[name.lower()] = factory


def available_calendars() -> List[str]:
    return sorted(_REGISTRY)


def get_calendar(name: str, **kwargs) -> Calendar:
    """Instantiate a registered calendar by case-insensitive name."""
    key = name.strip().lower()
    if key not in _REGISTRY:
        raise KeyError(f"Unknown calendar: {name}")
    return _REGISTRY[key](**kwargs)


def _parse_holidays(raw: Any) -> List[date]:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        raise ValueError("calendar.holidays must be a list of dates")
    holidays = []
    for item in raw:
        if isinstance(item, date):
            holidays.append(item)
        elif isinstance(item, str):
            holidays.append(date.fromisoformat(item))
        else:
            raise ValueError(f"Invalid holiday entry: {item!r}")
    return holidays


def calendar_from_config(config: dict) -> Calendar:
    """Build a calendar from the ``calendar`` section of a loaded config.

    Supported keys: name, weekend, holidays, join, max_search_days.
    """
    name = str(get_setting(config, "calendar.name", "WeekendsOnly"))
    max_search_days = int(
        get_setting(config, "calendar.max_search_days", DEFAULT_MAX_SEARCH_DAYS)
    )
    holidays = _parse_holidays(get_setting(config, "calendar.holidays", None))
    joins = get_setting(config, "calendar.join", None) or []

    if name.lower() == "custom":
        weekend = get_setting(config, "calendar.weekend", list(WEEKEND))
        calendar: Calendar = HolidayListCalendar(
            holidays, weekend=weekend, name="custom", max_search_days=max_search_days
        )
    else:
        calendar = get_calendar(name, max_search_days=max_search_days)
        if holidays:
            calendar = HolidayListCalendar(
                holidays,
                weekend=(),
                base=calendar,
                name=calendar.name,
                max_search_days=max_search_days,
            )

    if joins:
        others = [get_calendar(j, max_search_days=max_search_days) for j in joins]
        calendar = JointCalendar(
            calendar,
            *others,
            rule=JointRule.JOIN_HOLIDAYS,
            max_search_days=max_search_days,
        )

    logger.info(
        "Built calendar %s (%d extra holidays, max_search_days=%d)",
        calendar.name,
        len(holidays),
        max_search_days,
    )
    return calendar


def default_convention(config: dict) -> RollingConvention:
    value = get_setting(config, "engine.default_convention", "ModifiedFollowing")
    return RollingConvention.coerce(value)
