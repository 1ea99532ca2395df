#!/usr/bin/env python3
"""
Residuals of the analytic instants against a JPL kernel via skyfield.

For each solar term the apparent solar longitude is evaluated at the computed
instant and compared with the target multiple of 15 deg; for each new moon
the apparent elongation is compared with 0. Residuals are reported as time
offsets in seconds using the mean motions.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from nongli.astro import args as aa
from nongli.astro.deltat import jd_ut_to_tt
from nongli.core.time import to_jdn
from nongli.diagnostics._extras import _need_matplotlib, _need_numpy, _need_skyfield
from nongli.engines.ephemeris import AstronomicalEphemeris, term_longitude


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate computed solar-term and new-moon instants against JPL DE440s.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--kernel", default="de440s.bsp", help="Kernel name or path passed to skyfield's loader.")
    p.add_argument("--out-png", default=None, help="If given, save a residual plot here.")
    args = p.parse_args(argv)

    np = _need_numpy()
    load = _need_skyfield()

    print(f"Loading {args.kernel} ...")
    kernel = load(args.kernel)
    ts = load.timescale()
    earth, sun, moon = kernel["earth"], kernel["sun"], kernel["moon"]
    eph = AstronomicalEphemeris()

    def lon(body, jd_tt: float) -> float:
        t = ts.tt_jd(jd_tt)
        return earth.at(t).observe(body).apparent().ecliptic_latlon(epoch="date")[1].degrees

    term_years, term_err = [], []
    for year in range(args.start_year, args.end_year + 1):
        for i, jd_ut in enumerate(eph.solar_terms(year)):
            d = aa.wrap180(lon(sun, jd_ut_to_tt(jd_ut)) - term_longitude(i))
            term_years.append(year + i / 24.0)
            term_err.append(d / aa.SUN_DEG_PER_DAY * 86400.0)

    k0 = aa.lunation_index(to_jdn(args.start_year, 1, 1))
    k1 = aa.lunation_index(to_jdn(args.end_year, 12, 31))
    moon_years, moon_err = [], []
    for k in range(k0, k1 + 1):
        jd_tt = jd_ut_to_tt(eph.new_moon(k))
        d = aa.wrap180(lon(moon, jd_tt) - lon(sun, jd_tt))
        moon_years.append(2000.0 + (jd_tt - aa.J2000_TT) / 365.25)
        moon_err.append(d / aa.ELONGATION_DEG_PER_DAY * 86400.0)

    te, me = np.array(term_err), np.array(moon_err)
    print(f"solar terms: n={te.size}  mean={te.mean():+.2f} s  rms={np.sqrt((te ** 2).mean()):.2f} s  max|.|={np.abs(te).max():.2f} s")
    print(f"new moons:   n={me.size}  mean={me.mean():+.2f} s  rms={np.sqrt((me ** 2).mean()):.2f} s  max|.|={np.abs(me).max():.2f} s")

    if args.out_png:
        plt = _need_matplotlib()
        fig, axs = plt.subplots(2, 1, figsize=(12, 7), sharex=True)
        axs[0].scatter(term_years, term_err, s=1, alpha=0.5, color="orange")
        axs[0].set_title("Solar term instant error (computed - DE440s)")
        axs[0].set_ylabel("Error (s)")
        axs[0].grid(True, alpha=0.3)
        axs[1].scatter(moon_years, moon_err, s=1, alpha=0.5, color="blue")
        axs[1].set_title("New moon instant error (computed - DE440s)")
        axs[1].set_ylabel("Error (s)")
        axs[1].set_xlabel("Year")
        axs[1].grid(True, alpha=0.3)
        fig.tight_layout()
        fig.savefig(args.out_png, dpi=200)
        print(f"Saved: {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
