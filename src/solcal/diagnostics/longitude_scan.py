#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import solcal
from solcal import EventKind
from solcal.reference.solar import longitude_residual_deg

logger = logging.getLogger(__name__)

# mean solar motion, degrees per minute of time
SUN_DEG_PER_MIN = 360.0 / 365.2422 / 1440.0


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "solcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solcal[diagnostics]"') from e


def scan_residuals(np, from_year: int, to_year: int, *, periodic: bool = True):
    """
    Apparent-longitude residual (deg) at each computed event.

    Returns (years, residuals) with shapes (n,) and (n, 4); columns follow
    EventKind order. periodic=False evaluates the uncorrected mean instants.
    """
    years = np.arange(from_year, to_year + 1, dtype=int)
    res = np.empty((len(years), len(EventKind)), dtype=float)

    for i, Y in enumerate(years):
        for j, ev in enumerate(solcal.annual_events(int(Y))):
            if not periodic:
                ev = solcal.SolarEvent(
                    year=ev.year,
                    kind=ev.kind,
                    julian_day=ev.mean_julian_day,
                    timestamp=solcal.to_timestamp(ev.mean_julian_day),
                    mean_julian_day=ev.mean_julian_day,
                )
            res[i, j] = longitude_residual_deg(ev)
        if int(Y) % 50 == 0:
            logger.info("scanned through %d", int(Y))

    return years, res


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Check computed equinoxes/solstices against apparent solar longitude.")
    p.add_argument("--from-year", type=int, default=solcal.YEAR_MIN)
    p.add_argument("--to-year", type=int, default=solcal.YEAR_MAX)
    p.add_argument("--mean-only", action="store_true", help="Skip the periodic correction (JDE0 only).")
    p.add_argument("--plot", default="", help="Write a PNG of the residuals to this path.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    years, res = scan_residuals(np, args.from_year, args.to_year, periodic=not args.mean_only)

    print(f"Years {args.from_year}..{args.to_year}  ({'mean only' if args.mean_only else 'corrected'})")
    print(f"{'Event':<20}{'mean (deg)':>12}{'max|r| (deg)':>14}{'max|r| (min)':>14}")
    for j, kind in enumerate(EventKind):
        col = res[:, j]
        worst = float(np.max(np.abs(col)))
        print(f"{kind.label:<20}{float(np.mean(col)):>12.5f}{worst:>14.5f}{worst / SUN_DEG_PER_MIN:>14.2f}")

    if args.plot:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)
        for j, kind in enumerate(EventKind):
            ax.plot(years, res[:, j] / SUN_DEG_PER_MIN, linewidth=1.0, label=kind.label)
        ax.set_xlabel("Gregorian year")
        ax.set_ylabel("Residual (minutes of solar motion)")
        ax.set_title("Apparent solar longitude at computed events")
        ax.legend(loc="best", frameon=False)
        fig.savefig(args.plot, dpi=150)
        print(f"Saved: {args.plot}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
