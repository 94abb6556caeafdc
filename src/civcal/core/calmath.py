"""
civcal.core.calmath
-------------------
Pure integer functions over epoch days and years: weekday, ISO week and the
date of Western Easter Sunday.
"""

from __future__ import annotations
from typing import Tuple

from .time import days_from_fields, fields_from_days
from .types import IsoWeek, Weekday

# Day 0 (0001-01-01) is a Monday.
_WEEKDAY_SHIFT = 1

# First year the Gregorian Easter computus applies.
GREGORIAN_EASTER_FROM = 1583


def weekday_of(days: int) -> Weekday:
    return Weekday((days + _WEEKDAY_SHIFT) % 7)


def iso_week(days: int) -> IsoWeek:
    """
    ISO-8601 (year, week). The week belongs to the year of its Thursday, so
    late December can land in week 1 of the next year and early January in
    week 52/53 of the previous one.
    """
    thursday = days - weekday_of(days).iso + 4
    year = fields_from_days(thursday).year
    jan1 = days_from_fields(year, 1, 1)
    return IsoWeek(year, (thursday - jan1) // 7 + 1)


def easter_date(year: int) -> Tuple[int, int]:
    """
    (month, day) of Western Easter Sunday.

    From 1583 on this is the anonymous Gregorian algorithm (Meeus/Jones/Butcher).
    Before 1583 it is the Julian computus, and the result is a Julian calendar
    month/day.
    """
    a = year % 19
    if year >= GREGORIAN_EASTER_FROM:
        b = year // 100
        c = year % 100
        d = b // 4
        e = b % 4
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        h = (19 * a + b - d - g + 15) % 30
        i = c // 4
        k = c % 4
        l = (32 + 2 * e + 2 * i - h - k) % 7
        m = (a + 11 * h + 22 * l) // 451
        n = 21 + h + l - 7 * m
    else:
        b = year % 7
        c = year % 4
        d = (19 * a + 15) % 30
        e = (2 * c + 4 * b - d + 34) % 7
        n = 21 + d + e
    # n counts days from March 1st (zero-based): 21 -> March 22nd
    return 3 + n // 31, n % 31 + 1


def easter_day(year: int) -> int:
    """Epoch day of Easter Sunday, with the month/day applied to `year`."""
    month, day = easter_date(year)
    return days_from_fields(year, month, day)
