#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from civcal.core.calmath import GREGORIAN_EASTER_FROM, easter_date
from civcal.core.time import days_from_fields


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "civcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "civcal[diagnostics]"') from e


def days_after_march_21(year: int) -> int:
    """Easter Sunday as days after March 21st (March 22nd = 1)."""
    month, day = easter_date(year)
    return days_from_fields(year, month, day) - days_from_fields(year, 3, 21)


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(days_after_march_21(int(Y)))
    return years, y


def histogram(np, y) -> "np.ndarray":
    """Counts per offset 1..35 (March 22nd .. April 25th)."""
    counts = np.zeros(35, dtype=int)
    for v in y.astype(int):
        if 1 <= v <= 35:
            counts[v - 1] += 1
    return counts


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Easter Sunday dates across years.")
    p.add_argument("--start-year", type=int, default=1500)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.start_year, args.end_year)
    greg = x >= GREGORIAN_EASTER_FROM

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Year")
    ax.set_ylabel("Days after March 21")
    ax.set_title("Western Easter Sunday")

    ax.scatter(x[~greg], y[~greg], s=10, c="0.45", alpha=0.5, label="Julian computus")
    ax.scatter(x[greg], y[greg], s=10, c="tab:blue", alpha=0.5, label="Gregorian computus")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")

    counts = histogram(np, y[greg])
    if counts.sum():
        top = int(np.argmax(counts)) + 1
        print(f"Most frequent Gregorian offset: {top} ({counts[top - 1]} years)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
