"""
nongli.engines.ephemeris
------------------------
New-moon and solar-term instants in Universal Time.

Two providers share one protocol:

- AstronomicalEphemeris solves the VSOP87 solar longitude for terms and sums
  the lunar phase series for new moons on demand. Each result is memoised,
  so every instant is computed at most once per process.
- TabulatedEphemeris serves the same instants from a CSV snapshot written by
  ``nongli diag dump-ephemeris``; a snapshot is the static table, the series
  are the documented way to extend it.

Solar terms are indexed per term-year: index 0 is 立春 (315 deg) of ``year``
and index 23 is 大寒 (300 deg) of ``year + 1``.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterator, Protocol, Tuple

from ..astro import args as aa
from ..astro.deltat import jd_tt_to_ut, jd_ut_to_tt
from ..astro.moon import jde_true_new_moon
from ..astro.sun import jd_tt_of_longitude
from ..core.errors import OutOfRangeError
from ..core.time import to_jdn

logger = logging.getLogger(__name__)

TERM_COUNT = 24
LICHUN_DEG = 315.0
_TERM_SPACING_DAYS = 365.2421896698 / TERM_COUNT


def term_longitude(index: int) -> float:
    """Apparent solar longitude (deg) of term `index` (0=立春)."""
    return (LICHUN_DEG + 15.0 * index) % 360.0


class EphemerisProtocol(Protocol):
    kind: str

    def new_moon(self, k: int) -> float:
        """JD (UT) of the new moon of Meeus lunation k."""
        ...

    def solar_terms(self, year: int) -> Tuple[float, ...]:
        """JD (UT) of the 24 terms of term-year `year`, 立春 first."""
        ...


# ------------------------------------------------------------
# Computed
# ------------------------------------------------------------

@lru_cache(maxsize=8192)
def _new_moon_ut(k: int) -> float:
    return jd_tt_to_ut(jde_true_new_moon(k))


@lru_cache(maxsize=1024)
def _solar_terms_ut(year: int) -> Tuple[float, ...]:
    logger.debug("solving solar terms for term-year %d", year)
    # 立春 falls on Feb 3-5; seed each term from the mean spacing
    jd0 = jd_ut_to_tt(to_jdn(year, 2, 4) - 0.5)
    out = []
    for i in range(TERM_COUNT):
        jd_tt = jd_tt_of_longitude(term_longitude(i), jd0 + i * _TERM_SPACING_DAYS)
        out.append(jd_tt_to_ut(jd_tt))
    return tuple(out)


@dataclass(frozen=True)
class AstronomicalEphemeris:
    kind: str = "astronomical"

    def new_moon(self, k: int) -> float:
        return _new_moon_ut(k)

    def solar_terms(self, year: int) -> Tuple[float, ...]:
        return _solar_terms_ut(year)


# ------------------------------------------------------------
# Tabulated
# ------------------------------------------------------------

_FIELDS = ("kind", "n", "index", "jd_ut")


class TabulatedEphemeris:
    """
    Read-only table loaded once from CSV.

    Columns: kind ("new_moon" | "solar_term"), n (lunation k or term-year),
    index (term index, 0 for new moons), jd_ut.
    """
    kind = "tabulated"

    def __init__(self, new_moons: Dict[int, float], terms: Dict[int, Tuple[float, ...]], source: str = ""):
        self._new_moons = dict(new_moons)
        self._terms = dict(terms)
        self.source = source

    @classmethod
    def load(cls, path: str | Path) -> "TabulatedEphemeris":
        path = Path(path).expanduser()
        new_moons: Dict[int, float] = {}
        partial: Dict[int, Dict[int, float]] = {}
        with path.open("r", encoding="utf-8", newline="") as f:
            for row in csv.DictReader(f):
                n = int(row["n"])
                jd = float(row["jd_ut"])
                if row["kind"] == "new_moon":
                    new_moons[n] = jd
                elif row["kind"] == "solar_term":
                    partial.setdefault(n, {})[int(row["index"])] = jd
                else:
                    raise ValueError(f"{path}: unknown row kind {row['kind']!r}")

        terms: Dict[int, Tuple[float, ...]] = {}
        for year, by_index in partial.items():
            if sorted(by_index) != list(range(TERM_COUNT)):
                raise ValueError(f"{path}: term-year {year} does not list all {TERM_COUNT} terms")
            terms[year] = tuple(by_index[i] for i in range(TERM_COUNT))

        logger.debug("loaded %d new moons and %d term-years from %s", len(new_moons), len(terms), path)
        return cls(new_moons, terms, source=str(path))

    def new_moon(self, k: int) -> float:
        try:
            return self._new_moons[k]
        except KeyError:
            raise OutOfRangeError(f"lunation k={k} is not in ephemeris table {self.source}") from None

    def solar_terms(self, year: int) -> Tuple[float, ...]:
        try:
            return self._terms[year]
        except KeyError:
            raise OutOfRangeError(f"term-year {year} is not in ephemeris table {self.source}") from None


# ------------------------------------------------------------
# Snapshot writer
# ------------------------------------------------------------

def iter_rows(eph: EphemerisProtocol, start_year: int, end_year: int) -> Iterator[Dict[str, object]]:
    """Rows covering term-years start_year-2 .. end_year+2 and the lunations spanning them."""
    for year in range(start_year - 2, end_year + 3):
        for i, jd in enumerate(eph.solar_terms(year)):
            yield {"kind": "solar_term", "n": year, "index": i, "jd_ut": f"{jd:.6f}"}

    k0 = aa.lunation_index(to_jdn(start_year - 2, 10, 1)) - 1
    k1 = aa.lunation_index(to_jdn(end_year + 3, 2, 1)) + 1
    for k in range(k0, k1 + 1):
        yield {"kind": "new_moon", "n": k, "index": 0, "jd_ut": f"{eph.new_moon(k):.6f}"}


def write_table(path: str | Path, eph: EphemerisProtocol, start_year: int, end_year: int) -> int:
    count = 0
    with Path(path).open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=_FIELDS)
        w.writeheader()
        for row in iter_rows(eph, start_year, end_year):
            w.writerow(row)
            count += 1
    return count
