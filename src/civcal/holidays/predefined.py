from __future__ import annotations
from typing import Optional, Tuple

from ..core.calmath import easter_date
from ..core.date import EpochDate
from ..core.time import fields_from_days
from ..core.types import Weekday
from .rules import ChangingHolidayRule, FixedHolidayRule

# Fixed
NEW_YEARS_DAY = FixedHolidayRule(1, 1, "New years day")
NEW_YEARS_EVE = FixedHolidayRule(12, 31, "New Year's Eve")
EPIPHANY = FixedHolidayRule(1, 6, "Epiphany")
INTERNATIONAL_WORKERS_DAY = FixedHolidayRule(5, 1, "International worker's day")
CHRISTMAS_EVE = FixedHolidayRule(12, 24, "Christmas eve")
CHRISTMAS_DAY = FixedHolidayRule(12, 25, "Christmas day")
SECOND_CHRISTMAS_DAY = FixedHolidayRule(12, 26, "Second day of Christmas")


def easter_offset_rule(name: str, offset: int) -> ChangingHolidayRule:
    """Holiday `offset` days after Western Easter Sunday of the date's year."""
    def fn(d: EpochDate) -> Optional[str]:
        year, month, day = fields_from_days(d.days - offset)
        if year == d.year and (month, day) == easter_date(year):
            return name
        return None
    return ChangingHolidayRule(name, fn)


def weekday_window_rule(
    name: str, weekday: Weekday, month: int, first_day: int, last_day: int
) -> ChangingHolidayRule:
    """Holiday on `weekday` with day-of-month in [first_day, last_day] of `month`."""
    def fn(d: EpochDate) -> Optional[str]:
        _, m, day = d.fields()
        if m == month and first_day <= day <= last_day and d.weekday() == weekday:
            return name
        return None
    return ChangingHolidayRule(name, fn)


GOOD_FRIDAY = easter_offset_rule("Good Friday", -2)
EASTER_SUNDAY = easter_offset_rule("Easter Sunday", 0)
EASTER_MONDAY = easter_offset_rule("Easter Monday", 1)
ASCENSION_DAY = easter_offset_rule("Ascension Day", 39)
PENTECOST = easter_offset_rule("Pentecost", 49)

EASTER_AND_FRIENDS: Tuple[ChangingHolidayRule, ...] = (
    GOOD_FRIDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ASCENSION_DAY,
    PENTECOST,
)

MIDSUMMER_EVE = weekday_window_rule("Midsummer Eve", Weekday.FRIDAY, 6, 19, 25)
MIDSUMMER_DAY = weekday_window_rule("Midsummer Day", Weekday.SATURDAY, 6, 20, 26)


def _all_saints_day_sweden(d: EpochDate) -> Optional[str]:
    # Saturday strictly between October 30th and November 7th.
    if d.weekday() != Weekday.SATURDAY:
        return None
    _, month, day = d.fields()
    if (10, 30) < (month, day) < (11, 7):
        return "All Saints' Day"
    return None


ALL_SAINTS_DAY_SWEDEN = ChangingHolidayRule("All Saints' Day", _all_saints_day_sweden)
