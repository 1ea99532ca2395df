from __future__ import annotations

from dataclasses import dataclass
from math import fmod, radians, sin


# ------------------------------------------------------------
# Angle helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0

# Mean daily motions (deg/day) used to seed Newton iterations
SUN_DEG_PER_DAY = 360.0 / 365.2421896698
ELONGATION_DEG_PER_DAY = 360.0 / 29.530588861


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


def synodic_month_days(T: float) -> float:
    """Mean synodic month (ELP2000/Meeus): 29.5305888531 + 2.1621e-7 T - 3.64e-10 T^2."""
    return 29.5305888531 + 2.1621e-7 * T - 3.64e-10 * (T * T)


def tropical_year_days(T: float) -> float:
    """Mean tropical year (Laskar): 365.2421896698 - 6.15359e-6 T - 7.29e-10 T^2 + 2.64e-10 T^3."""
    return 365.2421896698 - 6.15359e-6 * T - 7.29e-10 * (T * T) + 2.64e-10 * (T * T * T)


# ------------------------------------------------------------
# Fundamental arguments (Meeus ch. 47; degrees, wrapped)
# ------------------------------------------------------------

@dataclass(frozen=True)
class FundamentalArgs:
    Lp_deg: float     # Moon mean longitude
    D_deg: float      # mean elongation
    M_deg: float      # Sun mean anomaly
    Mp_deg: float     # Moon mean anomaly
    F_deg: float      # Moon argument of latitude
    Omega_deg: float  # longitude of the ascending node


def fundamental_args(T: float) -> FundamentalArgs:
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2

    Lp = 218.3164477 + 481267.88123421 * T - 0.0015786 * T2 + T3 / 538841.0 - T4 / 65194000.0
    D = 297.8501921 + 445267.1114034 * T - 0.0018819 * T2 + T3 / 545868.0 - T4 / 113065000.0
    M = 357.5291092 + 35999.0502909 * T - 0.0001536 * T2 + T3 / 24490000.0
    Mp = 134.9633964 + 477198.8675055 * T + 0.0087414 * T2 + T3 / 69699.0 - T4 / 14712000.0
    F = 93.2720950 + 483202.0175233 * T - 0.0036539 * T2 - T3 / 3526000.0 + T4 / 863310000.0
    Omega = 125.04452 - 1934.136261 * T + 0.0020708 * T2 + T3 / 450000.0

    return FundamentalArgs(
        Lp_deg=wrap_deg(Lp),
        D_deg=wrap_deg(D),
        M_deg=wrap_deg(M),
        Mp_deg=wrap_deg(Mp),
        F_deg=wrap_deg(F),
        Omega_deg=wrap_deg(Omega),
    )


def eccentricity_factor(T: float) -> float:
    """Earth-orbit eccentricity factor E scaling lunar terms that contain M."""
    return 1.0 - 0.002516 * T - 0.0000074 * (T * T)


# ------------------------------------------------------------
# Mean new moon (Meeus ch. 49)
# ------------------------------------------------------------

# JDE of the k=0 mean new moon (2000-01-06)
K0_JDE = 2451550.09766
MEAN_SYNODIC = 29.530588861


def jde_mean_new_moon(k: float) -> float:
    """
    Mean JDE (TT) of lunation k counted from 2000-01-06:
      JDE = 2451550.09766 + 29.530588861 k + 0.00015437 T^2 - 0.000000150 T^3 + 0.00000000073 T^4,
      T = k / 1236.85.
    """
    T = k / 1236.85
    T2 = T * T
    return K0_JDE + MEAN_SYNODIC * k + 0.00015437 * T2 - 0.000000150 * T2 * T + 0.00000000073 * T2 * T2


def lunation_index(jd: float) -> int:
    """Meeus lunation index k whose mean new moon lies nearest to jd."""
    return round((jd - K0_JDE) / MEAN_SYNODIC)


# ------------------------------------------------------------
# Nutation in longitude (IAU 1980, Meeus table 22.A)
# ------------------------------------------------------------

# (D, M, M', F, Omega, sine coefficient, its T rate) in 0.0001 arcsec
NUTATION_LON_TERMS = (
    (0, 0, 0, 0, 1, -171996, -174.2),
    (-2, 0, 0, 2, 2, -13187, -1.6),
    (0, 0, 0, 2, 2, -2274, -0.2),
    (0, 0, 0, 0, 2, 2062, 0.2),
    (0, 1, 0, 0, 0, 1426, -3.4),
    (0, 0, 1, 0, 0, 712, 0.1),
    (-2, 1, 0, 2, 2, -517, 1.2),
    (0, 0, 0, 2, 1, -386, -0.4),
    (0, 0, 1, 2, 2, -301, 0.0),
    (-2, -1, 0, 2, 2, 217, -0.5),
    (-2, 0, 1, 0, 0, -158, 0.0),
    (-2, 0, 0, 2, 1, 129, 0.1),
    (0, 0, -1, 2, 2, 123, 0.0),
    (2, 0, 0, 0, 0, 63, 0.0),
    (0, 0, 1, 0, 1, 63, 0.1),
    (2, 0, -1, 2, 2, -59, 0.0),
    (0, 0, -1, 0, 1, -58, -0.1),
    (0, 0, 1, 2, 1, -51, 0.0),
    (-2, 0, 2, 0, 0, 48, 0.0),
    (0, 0, -2, 2, 1, 46, 0.0),
    (2, 0, 0, 2, 2, -38, 0.0),
    (0, 0, 2, 2, 2, -31, 0.0),
    (0, 0, 2, 0, 0, 29, 0.0),
    (-2, 0, 1, 2, 2, 29, 0.0),
    (0, 0, 0, 2, 0, 26, 0.0),
    (-2, 0, 0, 2, 0, -22, 0.0),
    (0, 0, -1, 2, 1, 21, 0.0),
    (0, 2, 0, 0, 0, 17, -0.1),
    (2, 0, -1, 0, 1, 16, 0.0),
    (-2, 2, 0, 2, 2, -16, 0.1),
    (0, 1, 0, 0, 1, -15, 0.0),
    (-2, 0, 1, 0, 1, -13, 0.0),
    (0, -1, 0, 0, 1, -12, 0.0),
    (0, 0, 2, -2, 0, 11, 0.0),
)


def nutation_longitude_deg(T: float) -> float:
    """Nutation in longitude (delta psi) in degrees."""
    fa = fundamental_args(T)
    D, M, Mp, F, Om = (radians(x) for x in (fa.D_deg, fa.M_deg, fa.Mp_deg, fa.F_deg, fa.Omega_deg))
    total = 0.0
    for d, m, mp, f, om, coef, rate in NUTATION_LON_TERMS:
        total += (coef + rate * T) * sin(d * D + m * M + mp * Mp + f * F + om * Om)
    return total * 1e-4 / 3600.0
