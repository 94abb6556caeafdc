"""
civcal.holidays.locations
-------------------------
Predefined region calendars and the read-only registry over them.

Europe/Stockholm counts National day of Sweden (June 6th) only from 2005,
when it became a public holiday; earlier June 6ths are ordinary days.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

from . import predefined as p
from .calendar import EMPTY_CALENDAR, HolidayCalendar
from .rules import FixedHolidayRule

SWEDEN = HolidayCalendar(
    "Europe/Stockholm",
    fixed=(
        p.NEW_YEARS_EVE,
        p.NEW_YEARS_DAY,
        p.EPIPHANY,
        p.INTERNATIONAL_WORKERS_DAY,
        p.CHRISTMAS_EVE,
        p.CHRISTMAS_DAY,
        p.SECOND_CHRISTMAS_DAY,
        # Public holiday since 2005.
        FixedHolidayRule(6, 6, "National day of Sweden", first_year=2005, end_year=0),
    ),
    changing=p.EASTER_AND_FRIENDS + (
        p.MIDSUMMER_EVE,
        p.MIDSUMMER_DAY,
        p.ALL_SAINTS_DAY_SWEDEN,
    ),
)

# Region key (IANA zone name) -> calendar
BY_LOCATION: Mapping[str, HolidayCalendar] = MappingProxyType({
    "Europe/Stockholm": SWEDEN,
})


@dataclass(frozen=True, eq=False)
class HolidayRegistry:
    """Read-only region -> calendar lookup. Keys are matched exactly."""
    _calendars: Mapping[str, HolidayCalendar] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_calendars", MappingProxyType(dict(self._calendars)))

    def get(self, region: str) -> Optional[HolidayCalendar]:
        return self._calendars.get(region)

    def calendar_for(self, region: str) -> HolidayCalendar:
        """Calendar for `region`, or an empty one (no holidays) if unknown."""
        return self._calendars.get(region, EMPTY_CALENDAR)

    def regions(self) -> List[str]:
        return sorted(self._calendars.keys())

    def __contains__(self, region: object) -> bool:
        return region in self._calendars

    def __iter__(self) -> Iterator[str]:
        return iter(self.regions())

    def __len__(self) -> int:
        return len(self._calendars)
