"""
civcal.holidays.calendar
------------------------
A named, immutable collection of holiday rules, with the holiday/workday
predicates and the day-by-day scans built on them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from ..core.date import EpochDate
from ..core.errors import ScanLimitError
from ..core.time import days_from_fields
from .rules import HolidayRule


@dataclass(frozen=True)
class HolidayCalendar:
    name: str
    fixed: Tuple[HolidayRule, ...] = ()
    changing: Tuple[HolidayRule, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable, store tuples.
        object.__setattr__(self, "fixed", tuple(self.fixed))
        object.__setattr__(self, "changing", tuple(self.changing))

    def extend(
        self,
        name: str,
        fixed: Iterable[HolidayRule] = (),
        changing: Iterable[HolidayRule] = (),
    ) -> "HolidayCalendar":
        """A new calendar with extra rules; self is left untouched."""
        return HolidayCalendar(name, self.fixed + tuple(fixed), self.changing + tuple(changing))

    # ---------------------------------------------------------
    # Predicates
    # ---------------------------------------------------------

    def match(self, d: EpochDate) -> List[str]:
        """Names of all holidays on `d`, sorted."""
        names: List[str] = []
        for rule in self.fixed + self.changing:
            names.extend(rule.match_names(d))
        names.sort()
        return names

    def is_holiday(self, d: EpochDate) -> bool:
        return bool(self.match(d))

    def is_workday(self, d: EpochDate) -> bool:
        return not d.weekday().is_weekend and not self.is_holiday(d)

    def is_non_workday(self, d: EpochDate) -> bool:
        return not self.is_workday(d)

    # ---------------------------------------------------------
    # Scans. `d` itself is never a candidate. Without `limit` they
    # run until the predicate holds.
    # ---------------------------------------------------------

    def _scan(
        self,
        d: EpochDate,
        pred: Callable[[EpochDate], bool],
        step: int,
        limit: Optional[int],
    ) -> EpochDate:
        cur = d
        n = 0
        while True:
            if limit is not None and n >= limit:
                raise ScanLimitError(f"{self.name}: nothing found within {limit} days of {d}")
            cur = cur + step
            n += 1
            if pred(cur):
                return cur

    def previous_holiday(self, d: EpochDate, *, limit: Optional[int] = None) -> EpochDate:
        return self._scan(d, self.is_holiday, -1, limit)

    def previous_non_workday(self, d: EpochDate, *, limit: Optional[int] = None) -> EpochDate:
        return self._scan(d, self.is_non_workday, -1, limit)

    def previous_workday(self, d: EpochDate, *, limit: Optional[int] = None) -> EpochDate:
        return self._scan(d, self.is_workday, -1, limit)

    def next_workday(self, d: EpochDate, *, limit: Optional[int] = None) -> EpochDate:
        return self._scan(d, self.is_workday, 1, limit)

    def holidays_in_year(self, year: int) -> List[Tuple[EpochDate, str]]:
        """Every (date, name) in `year`, in date order."""
        start = days_from_fields(year, 1, 1)
        end = days_from_fields(year + 1, 1, 1)
        out: List[Tuple[EpochDate, str]] = []
        for days in range(start, end):
            d = EpochDate(days)
            for name in self.match(d):
                out.append((d, name))
        return out


EMPTY_CALENDAR = HolidayCalendar("empty")
