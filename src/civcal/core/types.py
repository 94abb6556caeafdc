from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, NamedTuple, Tuple

if TYPE_CHECKING:
    from .date import EpochDate

class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def iso(self) -> int:
        """ISO-8601 day number, Monday=1 .. Sunday=7."""
        return 7 if self == Weekday.SUNDAY else int(self)

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

class CalendarFields(NamedTuple):
    year: int
    month: int
    day: int

class IsoWeek(NamedTuple):
    year: int
    week: int

@dataclass(frozen=True)
class DayInfo:
    date: "EpochDate"
    region: str
    fields: CalendarFields
    weekday: Weekday
    iso_week: IsoWeek
    holidays: Tuple[str, ...] = ()
    is_workday: bool = True
