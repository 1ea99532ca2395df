"""
The Moon: geocentric longitude from the truncated ELP-2000/82 series
(Meeus ch. 47, ~10 arcsec) and true new-moon instants from the phase
series of Meeus ch. 49 (a few seconds against the full theory).
"""

from __future__ import annotations

import math

from . import args as aa
from .sun import apparent_longitude as sun_apparent_longitude

# Meeus table 47.A, longitude column: (D, M, M', F, coefficient in 1e-6 deg)
LON_TERMS = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
    (2, -2, -1, 0, 2048),
    (2, 0, 1, -2, -1773),
    (2, 0, 0, 2, -1595),
    (4, -1, -1, 0, 1215),
    (0, 0, 2, 2, -1110),
    (3, 0, -1, 0, -892),
    (2, 1, 1, 0, -810),
    (4, -1, -2, 0, 759),
    (0, 2, -1, 0, -713),
    (2, 2, -1, 0, -700),
    (2, 1, -2, 0, 691),
    (2, -1, 0, -2, 596),
    (4, 0, 1, 0, 549),
    (0, 0, 4, 0, 537),
    (4, -1, 0, 0, 520),
    (1, 0, -2, 0, -487),
    (2, 1, 0, -2, -399),
    (0, 0, 2, -2, -381),
    (1, 1, 1, 0, 351),
    (3, 0, -2, 0, -340),
    (4, 0, -3, 0, 330),
    (2, -1, 2, 0, 327),
    (0, 2, 1, 0, -323),
    (1, 1, -1, 0, 299),
    (2, 0, 3, 0, 294),
    (2, 0, -1, -2, 0),
)


def lunar_longitude(jd_tt: float) -> float:
    """Apparent geocentric ecliptic longitude of the Moon (degrees)."""
    T = aa.T_centuries(jd_tt)
    fa = aa.fundamental_args(T)
    E = aa.eccentricity_factor(T)

    D = math.radians(fa.D_deg)
    M = math.radians(fa.M_deg)
    Mp = math.radians(fa.Mp_deg)
    F = math.radians(fa.F_deg)

    total = 0.0
    for d, m, mp, f, coef in LON_TERMS:
        if m:
            coef *= E if abs(m) == 1 else E * E
        total += coef * math.sin(d * D + m * M + mp * Mp + f * F)

    # Venus, Jupiter and Earth-flattening terms
    A1 = math.radians(119.75 + 131.849 * T)
    A2 = math.radians(53.09 + 479264.290 * T)
    Lp = math.radians(fa.Lp_deg)
    total += 3958.0 * math.sin(A1) + 1962.0 * math.sin(Lp - F) + 318.0 * math.sin(A2)

    return aa.wrap_deg(fa.Lp_deg + total * 1e-6 + aa.nutation_longitude_deg(T))


def elongation(jd_tt: float) -> float:
    """Apparent Moon - Sun longitude in [-180, 180)."""
    return aa.wrap180(lunar_longitude(jd_tt) - sun_apparent_longitude(jd_tt))


# ------------------------------------------------------------
# True new moon (Meeus ch. 49)
# ------------------------------------------------------------

# (coefficient in days, power of E, M, M', F, Omega)
NEW_MOON_TERMS = (
    (-0.40720, 0, 0, 1, 0, 0),
    (0.17241, 1, 1, 0, 0, 0),
    (0.01608, 0, 0, 2, 0, 0),
    (0.01039, 0, 0, 0, 2, 0),
    (0.00739, 1, -1, 1, 0, 0),
    (-0.00514, 1, 1, 1, 0, 0),
    (0.00208, 2, 2, 0, 0, 0),
    (-0.00111, 0, 0, 1, -2, 0),
    (-0.00057, 0, 0, 1, 2, 0),
    (0.00056, 1, 1, 2, 0, 0),
    (-0.00042, 0, 0, 3, 0, 0),
    (0.00042, 1, 1, 0, 2, 0),
    (0.00038, 1, 1, 0, -2, 0),
    (-0.00024, 1, -1, 2, 0, 0),
    (-0.00017, 0, 0, 0, 0, 1),
    (-0.00007, 0, 2, 1, 0, 0),
    (0.00004, 0, 0, 2, -2, 0),
    (0.00004, 0, 3, 0, 0, 0),
    (0.00003, 0, 1, 1, -2, 0),
    (0.00003, 0, 0, 2, 2, 0),
    (-0.00003, 0, 1, 1, 2, 0),
    (0.00003, 0, -1, 1, 2, 0),
    (-0.00002, 0, -1, 1, -2, 0),
    (-0.00002, 0, 1, 3, 0, 0),
    (0.00002, 0, 0, 4, 0, 0),
)

# planetary arguments A1..A14: (constant, rate per lunation, coefficient in 1e-6 day)
PLANETARY_TERMS = (
    (299.77, 0.107408, 325),
    (251.88, 0.016321, 165),
    (251.83, 26.651886, 164),
    (349.42, 36.412478, 126),
    (84.66, 18.206239, 110),
    (141.74, 53.303771, 62),
    (207.14, 2.453732, 60),
    (154.84, 7.306860, 56),
    (34.52, 27.261239, 47),
    (207.19, 0.121824, 42),
    (291.34, 1.844379, 40),
    (161.72, 24.198154, 37),
    (239.56, 25.513099, 35),
    (331.55, 3.592518, 23),
)


def jde_true_new_moon(k: int) -> float:
    """JDE (TT) of the true new moon of Meeus lunation k."""
    T = k / 1236.85
    T2, T3, T4 = T * T, T * T * T, T * T * T * T
    E = aa.eccentricity_factor(T)

    M = math.radians(2.5534 + 29.10535670 * k - 0.0000014 * T2 - 0.00000011 * T3)
    Mp = math.radians(201.5643 + 385.81693528 * k + 0.0107582 * T2 + 0.00001238 * T3 - 0.000000058 * T4)
    F = math.radians(160.7108 + 390.67050284 * k - 0.0016118 * T2 - 0.00000227 * T3 + 0.000000011 * T4)
    Om = math.radians(124.7746 - 1.56375588 * k + 0.0020672 * T2 + 0.00000215 * T3)

    corr = 0.0
    for coef, e_pow, m, mp, f, om in NEW_MOON_TERMS:
        corr += coef * E ** e_pow * math.sin(m * M + mp * Mp + f * F + om * Om)

    planets = 0.0
    for i, (a0, rate, coef) in enumerate(PLANETARY_TERMS):
        arg = a0 + rate * k
        if i == 0:
            arg -= 0.009173 * T2
        planets += coef * math.sin(math.radians(arg))

    return aa.jde_mean_new_moon(k) + corr + planets * 1e-6
