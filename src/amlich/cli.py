from __future__ import annotations

import argparse
from datetime import date
import importlib
import logging
import re
import sys

from .calendar import GregorianDay, LunarDay
from .core.config import AmlichConfig
from .core.errors import AmlichError
from .month import GregorianMonth


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str, config: AmlichConfig) -> GregorianDay:
    if not _DATE_RE.match(s):
        raise SystemExit(f"Expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return GregorianDay.new(d, m, y, config=config)


# diag tool -> (module, option selecting its time zone)
_DIAG_TOOLS = {
    "round-trip": ("amlich.diagnostics.round_trip", "--tz"),
    "leap-months": ("amlich.diagnostics.leap_months", "--zones"),
    "new-years": ("amlich.diagnostics.new_years_table", "--zones"),
}


def run_diag(tool: str, argv: list[str], config: AmlichConfig) -> int:
    """Run a diagnostics main(argv); the configured zone applies unless argv names its own."""
    modpath, tz_opt = _DIAG_TOOLS[tool]
    if not any(a == tz_opt or a.startswith(tz_opt + "=") for a in argv):
        argv = [tz_opt, f"{config.tz_hours:g}"] + list(argv)
    return int(importlib.import_module(modpath).main(argv) or 0)


def format_day(g: GregorianDay) -> str:
    lunar = g.to_lunar()
    mark = " *" if lunar.leap else ""
    return f"{g.isoformat()} {g.day_of_week().short_title()} {lunar}{mark}"


def cmd_day(argv: list[str], config: AmlichConfig) -> int:
    p = argparse.ArgumentParser(prog="amlich day", description="Gregorian -> lunar date")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    print(format_day(_parse_ymd(args.date, config)))
    return 0


def cmd_lunar(argv: list[str], config: AmlichConfig) -> int:
    p = argparse.ArgumentParser(prog="amlich lunar", description="Lunar -> Gregorian date")
    p.add_argument("day", type=int)
    p.add_argument("month", type=int)
    p.add_argument("year", type=int)
    p.add_argument("--leap", action="store_true", help="The month is the inserted leap month.")
    args = p.parse_args(argv)

    g = LunarDay.new(args.day, args.month, args.year, args.leap, config=config).to_gregorian()
    print(g.isoformat())
    return 0


def cmd_month(argv: list[str], config: AmlichConfig) -> int:
    p = argparse.ArgumentParser(prog="amlich month", description="List a Gregorian month with lunar dates")
    p.add_argument("year", type=int, nargs="?")
    p.add_argument("month", type=int, nargs="?")
    args = p.parse_args(argv)

    if args.year is None:
        today = GregorianDay.from_date(date.today(), config=config)
        gm = today.to_month()
    else:
        if args.month is None:
            raise SystemExit("amlich month: give both YEAR and MONTH, or neither")
        gm = GregorianMonth(args.year, args.month, config=config)

    bound = gm.get_bound()
    print(gm.to_title())
    for g in bound:
        print(format_day(g))
    first, last = bound.to_tuple()
    print(f"{first.to_lunar()} to {last.to_lunar()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `amlich YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + list(argv)

    p = argparse.ArgumentParser(prog="amlich", description="Vietnamese lunisolar calendar toolkit CLI.")
    p.add_argument("--tz", type=float, default=None, help="UTC offset in hours (default: 7, or $AMLICH_TZ_HOURS)")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar date")
    sub.add_parser("lunar", help="Lunar -> Gregorian date")
    sub.add_parser("month", help="List a Gregorian month with lunar dates")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=sorted(_DIAG_TOOLS),
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = AmlichConfig.from_env()
        if args.tz is not None:
            config = config.replace(tz_hours=args.tz)

        if args.cmd == "day":
            return cmd_day(rest, config)

        if args.cmd == "lunar":
            return cmd_lunar(rest, config)

        if args.cmd == "month":
            return cmd_month(rest, config)

        if args.cmd == "diag":
            return run_diag(args.tool, rest, config)
    except AmlichError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
