from __future__ import annotations

import argparse
from typing import List, Optional

from nongli.engines.ephemeris import AstronomicalEphemeris, write_table
from nongli.engines.specs import MAX_YEAR, MIN_YEAR


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Write new-moon and solar-term instants (UT) to a CSV table for NONGLI_EPHEMERIS_TABLE."
    )
    p.add_argument("--start-year", type=int, default=MIN_YEAR)
    p.add_argument("--end-year", type=int, default=MAX_YEAR)
    p.add_argument("--out", default="nongli_ephemeris.csv")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    n = write_table(args.out, AstronomicalEphemeris(), args.start_year, args.end_year)
    print(f"Wrote {n} rows to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
