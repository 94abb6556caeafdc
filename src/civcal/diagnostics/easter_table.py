from __future__ import annotations

import argparse
from typing import List, Optional

from civcal.core.calmath import GREGORIAN_EASTER_FROM, easter_date
from civcal.core.date import EpochDate


RELATIVE = [
    ("Good Friday", -2),
    ("Easter Monday", 1),
    ("Ascension Day", 39),
    ("Pentecost", 49),
]


def mmdd(d: EpochDate) -> str:
    return d.format("01-02")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Print Western Easter Sunday and the Easter-relative holidays per year.")
    ap.add_argument("--from-year", type=int, default=2000)
    ap.add_argument("--to-year", type=int, default=2030)
    ap.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd", help="Display format (default: mmdd).")
    args = ap.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: EpochDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else str(d)

    headers = ["Year", "Easter"] + [name for name, _ in RELATIVE] + ["Computus"]
    colw = [6] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        month, day = easter_date(Y)
        easter = EpochDate.from_fields(Y, month, day)
        row = [str(Y), fmt(easter)] + [fmt(easter + off) for _, off in RELATIVE]
        row.append("gregorian" if Y >= GREGORIAN_EASTER_FROM else "julian")
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
