#!/usr/bin/env python3
from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Dict, List, Optional, Tuple

import argparse

import mebcal
from mebcal.core.types import Category

HOLIDAYS = ("Ramazan Bayramı", "Kurban Bayramı")


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "mebcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "mebcal[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def collect(start_year: int, end_year: int, *, calendar: Optional[str] = None) -> Dict[str, List[Tuple[int, date]]]:
    """(Gregorian year, start date) of every movable holiday attributed to each year."""
    out: Dict[str, List[Tuple[int, date]]] = {name: [] for name in HOLIDAYS}
    for Y in range(start_year, end_year + 1):
        for ev in mebcal.evaluate(Y, calendar=calendar):
            if ev.category is Category.OFFICIAL and ev.name in out:
                out[ev.name].append((Y, ev.start_date))
    return out


def occurrence_histogram(series: List[Tuple[int, date]], start_year: int, end_year: int) -> Counter:
    """How many Gregorian years hold 0, 1 or 2 occurrences of the holiday."""
    per_year = Counter(Y for Y, _ in series)
    return Counter(per_year.get(Y, 0) for Y in range(start_year, end_year + 1))


def mean_drift(np, series: List[Tuple[int, date]]) -> float:
    """Mean days gained per occurrence relative to a 365.2425-day year."""
    ords = np.array([d.toordinal() for _, d in series], dtype=float)
    if len(ords) < 2:
        return float("nan")
    return float(np.mean(np.diff(ords)) - 365.2425)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Drift of Ramazan/Kurban Bayramı through the Gregorian year.")
    p.add_argument("--from-year", type=int, default=1990)
    p.add_argument("--to-year", type=int, default=2060)
    p.add_argument("--calendar", default=None, help="Arithmetic Hijri variant (default: civil)")
    p.add_argument("--plot", action="store_true", help="Write a scatter plot (needs matplotlib)")
    p.add_argument("--outbase", default="bayram_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    data = collect(Y0, Y1, calendar=args.calendar)

    for name in HOLIDAYS:
        series = data[name]
        hist = occurrence_histogram(series, Y0, Y1)
        print(f"{name}: {len(series)} occurrences in {Y0}..{Y1}")
        print(f"  mean drift per occurrence: {mean_drift(np, series):+.3f} days")
        for k in sorted(hist):
            print(f"  years with {k} occurrence(s): {hist[k]}")

    if not args.plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    ax.set_title("Movable official holidays through the Gregorian year")

    for name, color in zip(HOLIDAYS, ("tab:blue", "tab:red")):
        series = data[name]
        x = np.array([Y for Y, _ in series], dtype=float)
        y = np.array([day_of_year(d) for _, d in series], dtype=float)
        ax.scatter(x, y, s=14, c=color, alpha=0.6, label=name)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)
    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
