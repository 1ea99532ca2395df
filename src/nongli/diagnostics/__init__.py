"""Diagnostics package.

- diagnostics: always available, light-weight checks (no ephemeris)
- diagnostics.ephem: optional (requires the ephemeris extra + a JPL kernel)
"""

__all__ = ["pretty_month", "round_trip", "leap_months", "dump_ephemeris"]
