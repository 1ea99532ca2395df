"""
Apparent solar longitude from the truncated VSOP87 Earth (Meeus ch. 25,
"higher accuracy"), and the TT instant at which it reaches a given value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from . import args as aa
from .vsop87 import earth_heliocentric

# FK5 frame correction to the VSOP87 longitude
FK5_DL_DEG = -0.09033 / 3600.0
# constant of aberration over R
ABERRATION_DEG = 20.4898 / 3600.0


@dataclass(frozen=True)
class SolarCoordinates:
    L_true_deg: float   # geometric, FK5, equinox of date
    L_app_deg: float    # plus nutation and aberration
    R_au: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    tau = (jd_tt - aa.J2000_TT) / 365250.0
    L, _, R = earth_heliocentric(tau)

    # geocentric Sun sits opposite the heliocentric Earth
    L_true = aa.wrap_deg(math.degrees(L) + 180.0 + FK5_DL_DEG)
    T = aa.T_centuries(jd_tt)
    L_app = aa.wrap_deg(L_true + aa.nutation_longitude_deg(T) - ABERRATION_DEG / R)
    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app, R_au=R)


def apparent_longitude(jd_tt: float) -> float:
    return solar_longitude(jd_tt).L_app_deg


def jd_tt_of_longitude(target_deg: float, jd_guess: float, *, tol_days: float = 1e-7, max_iter: int = 30) -> float:
    """
    Newton iteration for the instant (JD TT) nearest jd_guess at which the
    apparent solar longitude equals target_deg.
    """
    jd = jd_guess
    for _ in range(max_iter):
        diff = aa.wrap180(target_deg - apparent_longitude(jd))
        step = diff / aa.SUN_DEG_PER_DAY
        jd += step
        if abs(step) < tol_days:
            return jd
    raise ArithmeticError(f"solar longitude {target_deg} did not converge near JD {jd_guess}")
