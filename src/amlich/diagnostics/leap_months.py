#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Tuple

import amlich


def _plotting():
    """numpy and pyplot, imported on demand."""
    try:
        import numpy as np
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise RuntimeError('Plotting needs numpy and matplotlib. Install: pip install "amlich[diagnostics]"') from e
    return np, plt


# one marker per zone, drawn over the shared occupancy grid
ZONE_MARKERS = ("o", "s", "D")


def parse_zones(s: str) -> List[float]:
    out = [float(x.strip()) for x in s.split(",") if x.strip()]
    if not (1 <= len(out) <= len(ZONE_MARKERS)):
        raise SystemExit(f"--zones must contain 1 to {len(ZONE_MARKERS)} comma-separated offsets")
    return out


def leap_table(start_year: int, end_year: int, config: amlich.AmlichConfig) -> List[Tuple[int, int]]:
    """(lunar year, leap month) for every leap year in the range."""
    out = []
    for Y in range(start_year, end_year + 1):
        M = amlich.leap_month(Y, config=config)
        if M is not None:
            out.append((Y, M))
    return out


def occupancy(np, tables: Dict[float, List[Tuple[int, int]]], start_year: int, end_year: int):
    """12 x years grid counting the zones that put a leap month in each cell."""
    grid = np.zeros((12, end_year - start_year + 1), dtype=int)
    for rows in tables.values():
        for Y, M in rows:
            grid[M - 1, Y - start_year] += 1
    return grid


def plot_barcode(tables: Dict[float, List[Tuple[int, int]]], start_year: int, end_year: int, out: str, title: str) -> None:
    np, plt = _plotting()

    grid = occupancy(np, tables, start_year, end_year)
    years = np.arange(start_year, end_year + 2) - 0.5
    months = np.arange(1, 14) - 0.5

    fig, ax = plt.subplots(figsize=(max(6.0, 0.2 * grid.shape[1]), 3.6))
    # darker where more zones place a leap month
    ax.pcolormesh(years, months, grid, cmap="Greys", vmin=0, vmax=2 * len(tables), edgecolors="0.9", linewidth=0.5)

    for marker, (tz, rows) in zip(ZONE_MARKERS, tables.items()):
        if not rows:
            continue
        ys, ms = np.array(rows).T
        ax.scatter(ys, ms, marker=marker, s=40, facecolors="none", edgecolors="0.1", label=f"UTC{tz:+g}")

    ax.set_xlim(years[0], years[-1])
    ax.set_ylim(months[0], months[-1])
    ax.set_yticks([1, 3, 6, 9, 12])
    ax.set_xlabel("Lunar year")
    ax.set_ylabel("Leap month")
    ax.set_title(title)
    if any(tables.values()):
        ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-month table, and optional barcode plot, across time zones.")
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--zones", default="7", help="Comma list of 1-3 UTC offsets (default: 7).")
    p.add_argument("--out", default=None, help="Write a PNG barcode plot here (needs numpy + matplotlib).")
    p.add_argument("--title", default="Leap month pattern")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    tables = {tz: leap_table(start_year, end_year, amlich.AmlichConfig(tz_hours=tz)) for tz in parse_zones(args.zones)}

    for tz, rows in tables.items():
        print(f"UTC{tz:+g}: {len(rows)} leap years")
        for Y, M in rows:
            print(f"  {Y:04d}  leap month {M:02d}")

    if args.out:
        plot_barcode(tables, start_year, end_year, args.out, args.title)
        print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
