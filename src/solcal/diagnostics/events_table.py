from __future__ import annotations

from datetime import datetime
import argparse
from typing import List, Optional

import solcal
from solcal import EventKind


def short(ts: datetime) -> str:
    return f"{ts.month:02d}-{ts.day:02d} {ts.hour:02d}:{ts.minute:02d}"


def format_rows(from_year: int, to_year: int, fmt: str = "short") -> List[str]:
    """Header, rule and one line per year: the four events in calendar order."""
    def cell(ts: datetime) -> str:
        return short(ts) if fmt == "short" else ts.isoformat()

    width = 11 if fmt == "short" else 25
    headers = ["Year"] + [k.label for k in EventKind]
    colw = [5] + [max(width, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    out = [line, "-" * len(line)]

    for Y in range(from_year, to_year + 1):
        events = solcal.annual_events(Y)
        row = [str(Y).ljust(colw[0])]
        for ev, w in zip(events, colw[1:]):
            row.append(cell(ev.timestamp).ljust(w))
        out.append("  ".join(row).rstrip())
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print equinox/solstice table (UTC) for a range of years.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--format",
        choices=("short", "iso"),
        default="short",
        help="Cell format: 'MM-DD hh:mm' or full ISO timestamp (default: short).",
    )
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    for line in format_rows(args.from_year, args.to_year, args.format):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
