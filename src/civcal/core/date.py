from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from typing import Callable, Optional, Union

from .calmath import iso_week, weekday_of
from .errors import ConstructionError
from .layout import ISO_LAYOUT, format_days, parse_days
from .time import (
    check_day,
    date_from_days,
    days_from_date,
    days_from_fields,
    days_from_month_offset,
    fields_from_days,
)
from .types import CalendarFields, IsoWeek, Weekday

Clock = Callable[[], Union[datetime, date]]


@dataclass(frozen=True, order=True)
class EpochDate:
    """
    A civil date with one-day resolution, stored as days since 0001-01-01
    (proleptic Gregorian). Day 0 is a Monday.
    """
    days: int

    def __post_init__(self) -> None:
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            raise TypeError(f"EpochDate needs an int day count, got {type(self.days).__name__}")
        check_day(self.days)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def from_fields(cls, year: int, month: int, day: int) -> "EpochDate":
        """Strict: month 13 or February 30th raise ConstructionError."""
        return cls(days_from_fields(year, month, day))

    @classmethod
    def parse(cls, layout: str, text: str) -> "EpochDate":
        return cls(parse_days(layout, text))

    @classmethod
    def from_date(cls, d: date) -> "EpochDate":
        if isinstance(d, datetime):
            d = d.date()
        return cls(days_from_date(d))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "EpochDate":
        """The date of `dt` on its own wall clock (no zone conversion)."""
        return cls(days_from_date(dt.date()))

    @classmethod
    def today(cls, clock: Clock) -> "EpochDate":
        """Current date according to `clock`, a zero-argument callable."""
        return cls.from_date(clock())

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    def fields(self) -> CalendarFields:
        return fields_from_days(self.days)

    @property
    def year(self) -> int:
        return self.fields().year

    @property
    def month(self) -> int:
        return self.fields().month

    @property
    def day(self) -> int:
        return self.fields().day

    def weekday(self) -> Weekday:
        return weekday_of(self.days)

    def is_weekday(self, target: Weekday) -> bool:
        return self.weekday() == target

    def iso_week(self) -> IsoWeek:
        return iso_week(self.days)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add(self, years: int = 0, months: int = 0, days: int = 0) -> "EpochDate":
        """
        Shift by calendar fields: years and months first, carrying month
        overflow into the year, then the day of month is laid onto the new
        month (overflow rolls forward, Jan 31 + 1 month -> Mar 3 or Mar 2),
        then `days` is added as a flat shift.
        """
        y, m, d = self.fields()
        shifted = days_from_month_offset(y + years, m + months, d - 1)
        return EpochDate(check_day(shifted + days))

    def sub(self, other: "EpochDate") -> int:
        """Days elapsed from `other` to self; negative if `other` is later."""
        return self.days - other.days

    def before(self, ref: "EpochDate") -> bool:
        return self.days < ref.days

    def after(self, ref: "EpochDate") -> bool:
        return self.days > ref.days

    def compare(self, other: "EpochDate") -> int:
        return (self.days > other.days) - (self.days < other.days)

    def previous_or_same_weekday(self, target: Weekday) -> "EpochDate":
        """Closest date <= self on `target`; self when it already is one."""
        return EpochDate(self.days - (self.weekday() - target) % 7)

    def previous_weekday(self, target: Weekday) -> "EpochDate":
        """Closest date strictly before self on `target` (1..7 days back)."""
        return EpochDate(self.days - (self.weekday() - target + 6) % 7 - 1)

    def __add__(self, n: int) -> "EpochDate":
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return EpochDate(self.days + n)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, EpochDate):
            return self.sub(other)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return EpochDate(self.days - other)

    def __int__(self) -> int:
        return self.days

    # ---------------------------------------------------------
    # Rendering / interop
    # ---------------------------------------------------------

    def format(self, layout: str = ISO_LAYOUT) -> str:
        return format_days(layout, self.days)

    def __str__(self) -> str:
        return self.format(ISO_LAYOUT)

    def to_json(self) -> str:
        return f'"{self}"'

    def to_date(self) -> date:
        return date_from_days(self.days)

    def to_datetime(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        tzinfo: Optional[tzinfo] = None,
    ) -> datetime:
        d = self.to_date()
        return datetime(d.year, d.month, d.day, hour, minute, second, microsecond, tzinfo=tzinfo)

    def unix(self, tz: Optional[tzinfo] = None) -> int:
        """Unix seconds of the date's midnight in `tz` (UTC when omitted)."""
        dt = self.to_datetime(tzinfo=tz or timezone.utc)
        try:
            return int(dt.timestamp())
        except (OverflowError, ValueError) as e:
            raise ConstructionError(f"{self} has no unix timestamp in {tz}") from e


def system_clock(tz: Union[tzinfo, str, None] = None) -> Clock:
    """A clock reading the system time in `tz` (tzinfo or IANA key).

    An IANA key that the zone database does not know raises ConstructionError.
    """
    if isinstance(tz, str):
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
        try:
            tz = ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConstructionError(f"unknown time zone {tz!r}") from e
    return lambda: datetime.now(tz)


def today_in(tz: Union[tzinfo, str, None] = None) -> EpochDate:
    return EpochDate.today(system_clock(tz))
