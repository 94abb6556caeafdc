from __future__ import annotations

import argparse
from typing import List, Optional

import civcal
from civcal.core.date import EpochDate
from civcal.core.time import days_in_month


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_calendar(year: int, month: int, *, region: str) -> None:
    cal = civcal.calendar_for(region)
    first = EpochDate.from_fields(year, month, 1)
    n = days_in_month(year, month)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    notes: list[str] = []
    pad = first.weekday().iso - 1  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for i in range(n):
        d = first + i
        names = cal.match(d)
        if names:
            mark = "H"
            notes.append(f"{d}  {', '.join(names)}")
        elif d.weekday().is_weekend:
            mark = "."
        else:
            mark = ""
        wk.append(cell(f"{d.day:2d}", f"{mark:>2}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    print_grid(f"{region}  {first.format('January 2006')}", weeks)
    for line in notes:
        print(line)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a Gregorian month with weekends (.) and holidays (H) marked.")
    p.add_argument("year", type=int, nargs="?", default=None)
    p.add_argument("month", type=int, nargs="?", default=None)
    p.add_argument("--region", default=civcal.api.DEFAULT_REGION)
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        # sensible default demo
        month_calendar(2017, 6, region=args.region)
        return 0

    month_calendar(args.year, args.month, region=args.region)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
