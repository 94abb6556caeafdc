from __future__ import annotations
from datetime import date

from .errors import ConstructionError
from .types import CalendarFields

# Julian Day Number of 0001-01-01 (proleptic Gregorian), our day 0. A Monday.
JDN_EPOCH = 1721426

# Day counts are kept inside the signed 32-bit range.
MIN_DAY = -(2 ** 31)
MAX_DAY = 2 ** 31 - 1

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ConstructionError(f"month {month} out of range 1..12")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def check_day(days: int) -> int:
    """Return `days` unchanged if it fits the representable range."""
    if not MIN_DAY <= days <= MAX_DAY:
        raise ConstructionError(f"day count {days} outside [{MIN_DAY}, {MAX_DAY}]")
    return days


def _to_jdn(year: int, month: int, day: int) -> int:
    """Fliegel-Van Flandern. Floor division keeps it exact for any year."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def _from_jdn(jdn: int) -> CalendarFields:
    """Inverse of _to_jdn (proleptic Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return CalendarFields(year, month, day)


def days_from_fields(year: int, month: int, day: int) -> int:
    """Epoch day of a validated proleptic Gregorian date."""
    if not 1 <= day <= days_in_month(year, month):
        raise ConstructionError(f"day {day} out of range for {year:04d}-{month:02d}")
    return check_day(_to_jdn(year, month, day) - JDN_EPOCH)


def days_from_month_offset(year: int, month: int, offset: int) -> int:
    """
    Epoch day of `offset` days after the first of (year, month), where `month`
    may lie outside 1..12. Months are normalized into the year first.
    """
    ym = year * 12 + (month - 1)
    y, m0 = divmod(ym, 12)
    return check_day(_to_jdn(y, m0 + 1, 1) - JDN_EPOCH + offset)


def fields_from_days(days: int) -> CalendarFields:
    return _from_jdn(days + JDN_EPOCH)


def days_from_date(d: date) -> int:
    return d.toordinal() - 1


def date_from_days(days: int) -> date:
    if not date.min.toordinal() <= days + 1 <= date.max.toordinal():
        raise ConstructionError(f"day count {days} does not fit datetime.date")
    return date.fromordinal(days + 1)
