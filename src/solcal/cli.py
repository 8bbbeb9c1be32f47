from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import sys

from .core.errors import SolcalError

logger = logging.getLogger(__name__)


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


def _event_dict(ev) -> dict:
    return {
        "year": ev.year,
        "kind": ev.kind.slug,
        "julian_day": ev.julian_day,
        "mean_julian_day": ev.mean_julian_day,
        "timestamp": ev.timestamp.isoformat(),
    }


def _print_event(ev) -> None:
    print(f"{ev.kind.label} {ev.year}")
    print(f"  UTC        = {ev.timestamp.strftime('%Y-%m-%dT%H:%M:%SZ')}")
    print(f"  JDE        = {ev.julian_day:.6f}")
    print(f"  JDE0       = {ev.mean_julian_day:.6f}")
    print(f"  correction = {ev.correction_days * 1440.0:+.2f} min")


def cmd_event(argv: list[str]) -> int:
    import solcal

    p = argparse.ArgumentParser(prog="solcal event", description="Instant of one equinox or solstice.")
    p.add_argument("year", type=int)
    p.add_argument("kind", help=f"one of {solcal.list_events()} (short forms like 'march' work)")
    p.add_argument("--json", action="store_true")
    args = p.parse_args(argv)

    ev = solcal.compute_event(args.year, args.kind)
    if args.json:
        print(json.dumps(_event_dict(ev), indent=2))
    else:
        _print_event(ev)
    return 0


def cmd_year(argv: list[str]) -> int:
    import solcal

    p = argparse.ArgumentParser(prog="solcal year", description="All four solar events of a year.")
    p.add_argument("year", type=int)
    p.add_argument("--json", action="store_true")
    args = p.parse_args(argv)

    events = solcal.annual_events(args.year)
    if args.json:
        print(json.dumps([_event_dict(ev) for ev in events], indent=2))
        return 0
    for ev in events:
        print(f"{ev.kind.label:<18}  {ev.timestamp.strftime('%Y-%m-%d %H:%M:%S')} UTC  JDE {ev.julian_day:.5f}")
    return 0


def cmd_jd(argv: list[str]) -> int:
    from solcal.core.time import to_timestamp

    p = argparse.ArgumentParser(prog="solcal jd", description="Convert a Julian Day to a UTC timestamp.")
    p.add_argument("jd", type=float)
    args = p.parse_args(argv)

    print(to_timestamp(args.jd).strftime("%Y-%m-%dT%H:%M:%SZ"))
    return 0


def cmd_info(argv: list[str]) -> int:
    import solcal

    p = argparse.ArgumentParser(prog="solcal info", description="Static description of an event kind.")
    p.add_argument("kind")
    args = p.parse_args(argv)

    print(json.dumps(solcal.event_info(args.kind), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="solcal", description="Equinox and solstice instants, 1900-2100.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("event", help="Instant of one equinox or solstice")
    sub.add_parser("year", help="All four events of a year")
    sub.add_parser("jd", help="Julian Day -> UTC timestamp")
    sub.add_parser("info", help="Describe an event kind")

    # diagnostics
    sub.add_parser("table", help="Print an event table for a range of years (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["longitude"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "event": cmd_event,
        "year": cmd_year,
        "jd": cmd_jd,
        "info": cmd_info,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "table":
            return _run_module_main("solcal.diagnostics.events_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "longitude": "solcal.diagnostics.longitude_scan",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (SolcalError, KeyError) as e:
        msg = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"solcal: error: {msg}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
