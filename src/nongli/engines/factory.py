"""
nongli.engines.factory
----------------------
Turns a CalendarSpec plus an instant provider into a CalendarEngine.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..core.types import EngineSpec
from .calendar import CalendarEngine
from .ephemeris import AstronomicalEphemeris, EphemerisProtocol, TabulatedEphemeris

logger = logging.getLogger(__name__)

TABLE_ENV = "NONGLI_EPHEMERIS_TABLE"


def build_ephemeris(spec: EngineSpec, table: Optional[str] = None) -> EphemerisProtocol:
    """
    Pick the instant provider for a spec.

    An explicit `table` path, or the NONGLI_EPHEMERIS_TABLE environment
    variable, switches an astronomical spec to the tabulated provider.
    """
    table = table or os.environ.get(TABLE_ENV)
    if spec.kind == "tabulated" and not table:
        raise ValueError(f"Engine '{spec.id.name}' is tabulated; set {TABLE_ENV} or pass table=")
    if table:
        logger.debug("engine %s uses ephemeris table %s", spec.id.name, table)
        return TabulatedEphemeris.load(table)
    if spec.kind == "astronomical":
        return AstronomicalEphemeris()
    raise TypeError(f"Unknown engine kind: {spec.kind!r}")


def make_engine(spec: EngineSpec, *, ephemeris: Optional[EphemerisProtocol] = None) -> CalendarEngine:
    """The universal entry point."""
    if ephemeris is None:
        ephemeris = build_ephemeris(spec)
    return CalendarEngine(spec.payload, ephemeris)
