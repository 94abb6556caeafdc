"""Holiday rules, calendars and the predefined regions."""

from .rules import ChangingHolidayRule, FixedHolidayRule, HolidayRule
from .calendar import EMPTY_CALENDAR, HolidayCalendar
from .locations import BY_LOCATION, HolidayRegistry

__all__ = [
    "HolidayRule",
    "FixedHolidayRule",
    "ChangingHolidayRule",
    "HolidayCalendar",
    "EMPTY_CALENDAR",
    "HolidayRegistry",
    "BY_LOCATION",
]
