from __future__ import annotations

import argparse
import random
from typing import List, Optional

import nongli
from nongli.core.time import to_jdn
from nongli.core.types import SolarDate


def parse_engines(s: str) -> List[str]:
    # "china,korea" -> ["china", "korea"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(engine: str, N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> int:
    rng = random.Random(seed)
    lo, hi = to_jdn(start_year, 1, 1), to_jdn(end_year, 12, 31)
    failures = 0

    for _ in range(N):
        d0 = SolarDate.from_jdn(rng.randint(lo, hi))
        lunar = nongli.solar_to_lunar(d0.year, d0.month, d0.day, engine=engine)
        back = nongli.lunar_to_solar(lunar.year, lunar.month, lunar.day, lunar.is_leap_month, engine=engine)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("engine:", engine)
            print("d0:", d0)
            print("lunar:", lunar)
            print("back:", back)
            print("day_info(debug=True):", nongli.day_info(d0, engine=engine, debug=True).debug)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: solar -> lunar -> solar.")
    p.add_argument("--engines", type=str, default="china,korea,vietnam", help="Comma-separated engine list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per engine.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    total_fail = 0
    for eng in parse_engines(args.engines):
        print(f"Testing {eng} ...")
        total_fail += roundtrip_test(
            eng, N=args.N, start_year=args.start_year, end_year=args.end_year,
            seed=args.seed, max_failures=args.max_failures,
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
