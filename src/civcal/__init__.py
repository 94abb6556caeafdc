"""civcal public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    holiday_names,
    is_holiday,
    is_workday,
    previous_holiday,
    previous_non_workday,
    previous_workday,
    next_workday,
    list_regions,
    get_calendar,
    calendar_for,
    registry,
    parse_date,
    today,
)
from .core.calmath import easter_date, iso_week, weekday_of
from .core.date import EpochDate, system_clock, today_in
from .core.errors import CivcalError, ConstructionError, ParseError, ScanLimitError
from .core.types import CalendarFields, DayInfo, IsoWeek, Weekday
from .holidays import ChangingHolidayRule, FixedHolidayRule, HolidayCalendar, HolidayRegistry

__all__ = [
    "day_info",
    "holiday_names",
    "is_holiday",
    "is_workday",
    "previous_holiday",
    "previous_non_workday",
    "previous_workday",
    "next_workday",
    "list_regions",
    "get_calendar",
    "calendar_for",
    "registry",
    "parse_date",
    "today",
    "easter_date",
    "iso_week",
    "weekday_of",
    "EpochDate",
    "system_clock",
    "today_in",
    "CivcalError",
    "ConstructionError",
    "ParseError",
    "ScanLimitError",
    "CalendarFields",
    "DayInfo",
    "IsoWeek",
    "Weekday",
    "ChangingHolidayRule",
    "FixedHolidayRule",
    "HolidayCalendar",
    "HolidayRegistry",
]
