from __future__ import annotations

import argparse
import random
from typing import List, Optional

from civcal.core.date import EpochDate
from civcal.core.time import days_in_month


def random_fields(rng: random.Random, start_year: int, end_year: int) -> tuple[int, int, int]:
    y = rng.randint(start_year, end_year)
    m = rng.randint(1, 12)
    d = rng.randint(1, days_in_month(y, m))
    return y, m, d


def roundtrip_test(N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> int:
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        ymd = random_fields(rng, start_year, end_year)
        d = EpochDate.from_fields(*ymd)
        back = tuple(d.fields())
        if back != ymd:
            failures += 1
            print("\nFAIL (fields)")
            print("in:  ", ymd)
            print("days:", d.days)
            print("out: ", back)
            if failures >= max_failures:
                return failures

        text = str(d)
        if EpochDate.parse("2006-01-02", text) != d:
            failures += 1
            print("\nFAIL (text)")
            print("in:  ", ymd)
            print("text:", text)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: fields -> epoch day -> fields / text.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start-year", type=int, default=-9999)
    p.add_argument("--end-year", type=int, default=9999)
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    f = roundtrip_test(args.N, args.start_year, args.end_year, args.seed, max_failures=args.max_failures)
    if f == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {f}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
