from __future__ import annotations
import logging

from civcal.holidays.locations import BY_LOCATION, HolidayRegistry

log = logging.getLogger(__name__)

def build_registry() -> HolidayRegistry:
    reg = HolidayRegistry(BY_LOCATION)
    log.debug("holiday registry built with %d region(s): %s", len(reg), ", ".join(reg.regions()))
    return reg
