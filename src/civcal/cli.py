from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from civcal.core.layout import ISO_LAYOUT


_DATE_RE = re.compile(r"^-?\d{4,}-\d{2}-\d{2}$")

log = logging.getLogger("civcal.cli")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_day(argv: list[str]) -> int:
    import civcal

    p = argparse.ArgumentParser(prog="civcal day", description="Weekday, ISO week and holidays of a date")
    p.add_argument("date", help="date text, YYYY-MM-DD unless --layout is given")
    p.add_argument("--layout", default=ISO_LAYOUT, help="reference-date layout, e.g. '02.01.2006'")
    p.add_argument("--region", default=civcal.api.DEFAULT_REGION)
    args = p.parse_args(argv)

    try:
        d = civcal.parse_date(args.layout, args.date)
    except civcal.ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if civcal.get_calendar(args.region) is None:
        log.warning("no holiday calendar for region %r; treating every day as a non-holiday", args.region)

    info = civcal.day_info(d, region=args.region)
    print(f"date      {info.date}")
    print(f"weekday   {info.weekday}")
    print(f"iso week  {info.iso_week.year}-W{info.iso_week.week:02d}")
    print(f"holidays  {', '.join(info.holidays) if info.holidays else '-'}")
    print(f"workday   {'yes' if info.is_workday else 'no'}")
    return 0


def cmd_holidays(argv: list[str]) -> int:
    import civcal

    p = argparse.ArgumentParser(prog="civcal holidays", description="List the holidays of a year")
    p.add_argument("year", type=int)
    p.add_argument("--region", default=civcal.api.DEFAULT_REGION)
    p.add_argument("--layout", default=ISO_LAYOUT)
    args = p.parse_args(argv)

    cal = civcal.calendar_for(args.region)
    for d, name in cal.holidays_in_year(args.year):
        print(f"{d.format(args.layout)}  {d.weekday()!s:<9}  {name}")
    return 0


def cmd_regions(argv: list[str]) -> int:
    import civcal

    argparse.ArgumentParser(prog="civcal regions", description="List regions with a holiday calendar").parse_args(argv)
    for r in civcal.list_regions():
        print(r)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `civcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="civcal", description="Civil calendar and holiday toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Weekday, ISO week and holidays of a date")
    sub.add_parser("holidays", help="List the holidays of a year")
    sub.add_parser("regions", help="List regions with a holiday calendar")
    sub.add_parser("month", help="Print a month grid with holidays marked")
    sub.add_parser("easter", help="Print Easter dates per year")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "easter-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "holidays":
        return cmd_holidays(rest)

    if args.cmd == "regions":
        return cmd_regions(rest)

    if args.cmd == "month":
        return _run_module_main("civcal.diagnostics.pretty_month", rest)

    if args.cmd == "easter":
        return _run_module_main("civcal.diagnostics.easter_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "civcal.diagnostics.round_trip",
            "easter-scatter": "civcal.diagnostics.easter_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
