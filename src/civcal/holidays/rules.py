"""
civcal.holidays.rules
---------------------
The two built-in kinds of holiday rule. A calendar only calls
`match_names`, so any object with a `name` and that method can be used.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Tuple

from ..core.date import EpochDate
from ..core.errors import ConstructionError


class HolidayRule(Protocol):
    name: str

    def match_names(self, d: EpochDate) -> Tuple[str, ...]: ...


@dataclass(frozen=True)
class FixedHolidayRule:
    """
    A holiday on the same month/day every year.

    The validity window is given by the first year with and the first year
    without the holiday:
      first_year == end_year  -> every year
      end_year < first_year   -> first_year onward
      otherwise               -> [first_year, end_year)
    """
    month: int
    day: int
    name: str
    first_year: int = 0
    end_year: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ConstructionError(f"{self.name}: month {self.month} out of range 1..12")
        if not 1 <= self.day <= 31:
            raise ConstructionError(f"{self.name}: day {self.day} out of range 1..31")

    def active_in(self, year: int) -> bool:
        if self.first_year == self.end_year:
            return True
        return self.first_year <= year and (year < self.end_year or self.end_year < self.first_year)

    def match(self, d: EpochDate) -> bool:
        year, month, day = d.fields()
        return month == self.month and day == self.day and self.active_in(year)

    def match_names(self, d: EpochDate) -> Tuple[str, ...]:
        return (self.name,) if self.match(d) else ()


@dataclass(frozen=True)
class ChangingHolidayRule:
    """A computed holiday: `fn` returns the holiday name for a date, or None."""
    name: str
    fn: Callable[[EpochDate], Optional[str]]

    def match(self, d: EpochDate) -> List[str]:
        hit = self.fn(d)
        return [hit] if hit else []

    def match_names(self, d: EpochDate) -> Tuple[str, ...]:
        return tuple(self.match(d))
