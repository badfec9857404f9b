from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys

from .core.errors import MalformedYearInput, MebcalError

_YEAR_RE = re.compile(r"^-?\d+$")

LOG_FORMAT = "%(levelname)s-%(asctime)s-%(name)s :: %(message)s"

logger = logging.getLogger(__name__)


def parse_year(s: str) -> int:
    s = s.strip()
    if not _YEAR_RE.match(s):
        raise MalformedYearInput(f"Please give a valid year, e.g. 'mebcal 2034' (got {s!r})")
    year = int(s)
    if not (1 <= year <= 9999):
        raise MalformedYearInput(f"Year must be in 1..9999, got {year}")
    return year


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


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


def cmd_show(args: argparse.Namespace) -> int:
    import mebcal
    from .storage import EventStore
    from .table import print_table

    year = parse_year(args.year)
    with EventStore(args.db) as store:
        events, computed = mebcal.settle(year, store, recompute=args.recompute, calendar=args.calendar)

    if computed:
        print(f"{year}: computed and stored {len(events)} events.")
    else:
        print(f"{year}: already stored, {len(events)} events read.")
    print_table(events)
    return 0


def cmd_compute(args: argparse.Namespace) -> int:
    import mebcal
    from .table import print_table

    year = parse_year(args.year)
    rep = mebcal.evaluate_report(year, calendar=args.calendar)
    events = [ev for ev in rep.events if args.category is None or ev.category.value == args.category]
    print_table(events)
    for sk in rep.skipped:
        print(f"skipped: {sk.name} ({sk.category.value}): {sk.reason}", file=sys.stderr)
    return 0


def cmd_hijri(args: argparse.Namespace) -> int:
    import mebcal

    h = mebcal.gregorian_to_hijri(_parse_ymd(args.date), calendar=args.calendar)
    print(f"{h.year:04d}-{h.month:02d}-{h.day:02d}")
    return 0


def cmd_gregorian(args: argparse.Namespace) -> int:
    import mebcal

    d = mebcal.hijri_to_gregorian(args.hy, args.hm, args.hd, calendar=args.calendar)
    print(d.isoformat())
    return 0


def build_parser(settings) -> argparse.ArgumentParser:
    from .engines.hijri import HIJRI_CALENDARS

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--calendar", choices=sorted(HIJRI_CALENDARS), default=settings.hijri_calendar,
                        help="Arithmetic Hijri variant (default: %(default)s)")

    p = argparse.ArgumentParser(prog="mebcal", description="Turkish school/work calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level INFO")
    p.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_show = sub.add_parser("show", parents=[common], help="Load a year from the store, computing it if absent")
    p_show.add_argument("year")
    p_show.add_argument("--db", default=settings.db_url, help="SQLAlchemy URL (default: %(default)s)")
    p_show.add_argument("--recompute", action="store_true", help="Recompute the year and replace its stored events")
    p_show.set_defaults(func=cmd_show)

    p_comp = sub.add_parser("compute", parents=[common], help="Evaluate a year without touching the store")
    p_comp.add_argument("year")
    p_comp.add_argument("--category", choices=("Official", "School", "Commemorative"))
    p_comp.set_defaults(func=cmd_compute)

    p_hij = sub.add_parser("hijri", parents=[common], help="Gregorian -> Hijri date")
    p_hij.add_argument("date", help="YYYY-MM-DD")
    p_hij.set_defaults(func=cmd_hijri)

    p_greg = sub.add_parser("gregorian", parents=[common], help="Hijri -> Gregorian date")
    p_greg.add_argument("hy", type=int)
    p_greg.add_argument("hm", type=int)
    p_greg.add_argument("hd", type=int)
    p_greg.set_defaults(func=cmd_gregorian)

    sub.add_parser("drift", help="Plot movable holiday drift through the Gregorian year (diagnostics)")
    return p


_COMMANDS = ("show", "compute", "hijri", "gregorian", "drift")


def _skip_global_flags(argv: list[str]) -> int:
    """Index of the first token after the leading top-level options."""
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok in ("-v", "--verbose") or tok.startswith("--log-level="):
            i += 1
        elif tok == "--log-level":
            i += 2
        else:
            break
    return i


def main(argv: list[str] | None = None) -> int:
    from .settings import MebcalSettings

    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `mebcal [-v] 2034 ...` == `mebcal [-v] show 2034 ...`
    argv = list(argv)
    i = _skip_global_flags(argv)
    if i < len(argv) and not argv[i].startswith("-") and argv[i] not in _COMMANDS:
        argv.insert(i, "show")

    settings = MebcalSettings()
    p = build_parser(settings)
    args, rest = p.parse_known_args(argv)
    _setup_logging("INFO" if args.verbose else args.log_level)

    if args.cmd == "drift":
        return _run_module_main("mebcal.diagnostics.bayram_drift", rest)
    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        return args.func(args)
    except MalformedYearInput as e:
        p.print_usage(sys.stderr)
        print(f"mebcal: error: {e}", file=sys.stderr)
        return 2
    except MebcalError as e:
        logger.error("%s", e)
        print(f"mebcal: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
