from __future__ import annotations

import argparse
from typing import List

import amlich


def parse_zones(arg: str) -> List[float]:
    """
    Parse a comma list of UTC offsets, e.g. "7,8".
    """
    return [float(x.strip()) for x in arg.split(",") if x.strip()]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Tet (day 1 of lunar month 1) for a range of lunar years, per time zone."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--zones", type=str, default="7", help='Comma list of UTC offsets in hours (default: "7").')
    p.add_argument(
        "--dates",
        choices=("ddmm", "full"),
        default="full",
        help="Display format in table columns (default: full).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    configs = [amlich.AmlichConfig(tz_hours=tz) for tz in parse_zones(args.zones)]
    if not configs:
        raise SystemExit("--zones must name at least one offset")

    def fmt(d: amlich.GregorianDay) -> str:
        return f"{d.day:02d}/{d.month:02d}" if args.dates == "ddmm" else str(d)

    headers = ["Year"] + [f"UTC{c.tz_hours:+g}" for c in configs]
    colw = [5] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    diverging: list[int] = []
    for Y in range(Y0, Y1 + 1):
        days = [amlich.new_year_day(Y, config=c) for c in configs]
        row = [str(Y).ljust(colw[0])] + [fmt(d).ljust(w) for d, w in zip(days, colw[1:])]
        print("  ".join(row))
        if len(set(days)) > 1:
            diverging.append(Y)

    if len(configs) > 1:
        print("\nYears where the zones disagree:")
        print(", ".join(str(Y) for Y in diverging) if diverging else "(none)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
