from __future__ import annotations

import argparse
import random

import amlich


def parse_date(s: str) -> amlich.GregorianDay:
    y, m, d = s.split("-")
    return amlich.GregorianDay.new(int(d), int(m), int(y))


def roundtrip_test(
    config: amlich.AmlichConfig,
    N: int,
    start: amlich.GregorianDay,
    end: amlich.GregorianDay,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    j0, j1 = start.to_julian_days(), end.to_julian_days()

    for _ in range(N):
        jdn = random.randint(j0, j1)
        g0 = amlich.GregorianDay.from_julian_days(jdn, config=config)
        lunar = g0.to_lunar()
        back = lunar.to_gregorian()
        if back != g0:
            failures += 1
            print("\nFAIL")
            print("jdn:", jdn)
            print("gregorian:", g0)
            print("lunar:", lunar, "(leap)" if lunar.leap else "")
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> lunar -> gregorian.")
    p.add_argument("--tz", type=float, default=7.0, help="UTC offset in hours (default: 7).")
    p.add_argument("--N", type=int, default=2000, help="Number of trials.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    config = amlich.AmlichConfig(tz_hours=args.tz)
    print(f"Testing UTC{config.tz_hours:+g} ...")
    failures = roundtrip_test(config, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
