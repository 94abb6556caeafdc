from __future__ import annotations

from typing import List, Optional

from .core.date import EpochDate, today_in
from .core.types import DayInfo
from .holidays.calendar import HolidayCalendar
from .holidays.locations import HolidayRegistry

DEFAULT_REGION = "Europe/Stockholm"
_registry: Optional[HolidayRegistry] = None

def set_registry(reg: HolidayRegistry) -> None:
    """Install the process-wide registry. Only once; it is read-only afterwards."""
    global _registry
    if _registry is not None:
        raise RuntimeError("Holiday registry already initialized")
    _registry = reg

def _reg() -> HolidayRegistry:
    if _registry is None:
        raise RuntimeError("Holiday registry not initialized")
    return _registry

def registry() -> HolidayRegistry:
    return _reg()

def list_regions() -> List[str]:
    return _reg().regions()

def get_calendar(region: str) -> Optional[HolidayCalendar]:
    """Calendar for `region`, None if the region is not registered."""
    return _reg().get(region)

def calendar_for(region: str) -> HolidayCalendar:
    """Calendar for `region`; unknown regions get an empty calendar."""
    return _reg().calendar_for(region)

def parse_date(layout: str, text: str) -> EpochDate:
    return EpochDate.parse(layout, text)

def holiday_names(d: EpochDate, *, region: str = DEFAULT_REGION) -> List[str]:
    return calendar_for(region).match(d)

def is_holiday(d: EpochDate, *, region: str = DEFAULT_REGION) -> bool:
    return calendar_for(region).is_holiday(d)

def is_workday(d: EpochDate, *, region: str = DEFAULT_REGION) -> bool:
    return calendar_for(region).is_workday(d)

def previous_holiday(d: EpochDate, *, region: str = DEFAULT_REGION, limit: Optional[int] = None) -> EpochDate:
    return calendar_for(region).previous_holiday(d, limit=limit)

def previous_non_workday(d: EpochDate, *, region: str = DEFAULT_REGION, limit: Optional[int] = None) -> EpochDate:
    return calendar_for(region).previous_non_workday(d, limit=limit)

def previous_workday(d: EpochDate, *, region: str = DEFAULT_REGION, limit: Optional[int] = None) -> EpochDate:
    return calendar_for(region).previous_workday(d, limit=limit)

def next_workday(d: EpochDate, *, region: str = DEFAULT_REGION, limit: Optional[int] = None) -> EpochDate:
    return calendar_for(region).next_workday(d, limit=limit)

def today(*, region: str = DEFAULT_REGION) -> EpochDate:
    """Today's date in the zone named by `region` (region keys are IANA names).

    Raises ConstructionError when `region` is not a known time zone.
    """
    return today_in(region)

def day_info(d: EpochDate, *, region: str = DEFAULT_REGION) -> DayInfo:
    cal = calendar_for(region)
    names = cal.match(d)
    return DayInfo(
        date=d,
        region=region,
        fields=d.fields(),
        weekday=d.weekday(),
        iso_week=d.iso_week(),
        holidays=tuple(names),
        is_workday=not names and not d.weekday().is_weekend,
    )
