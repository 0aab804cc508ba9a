#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

from birthcal.diagnostics.birthday_table import drift_rows


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "birthcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "birthcal[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np, birth_date: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Lunar years and day-of-year of the solar birthday; missing years are dropped."""
    rows = [(Y, d) for Y, d in drift_rows(birth_date, start_year, end_year) if d is not None]
    years = np.array([Y for Y, _ in rows], dtype=int)
    y = np.array([float(day_of_year(d)) for _, d in rows], dtype=float)
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the solar dates of lunar birthdays across years.")
    p.add_argument("dates", nargs="+", help="lunar birth dates Y-M-D")
    p.add_argument("--from-year", type=int, default=1950)
    p.add_argument("--to-year", type=int, default=2050)
    p.add_argument("--outbase", default="lunar_birthday_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Lunar year")
    ax.set_ylabel("Day-of-year of the solar date (Jan 1 = 1)")
    ax.set_title("Lunar birthdays on the Gregorian calendar")

    for birth_date in args.dates:
        x, y = build_series(np, birth_date, args.from_year, args.to_year)
        ax.scatter(x, y, s=14, alpha=0.6, label=birth_date)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
