"""Builds the standard calendar engines and installs them behind nongli.api."""

from __future__ import annotations

import logging

from .api import set_registry
from .core.engine import EngineRegistry
from .engines.factory import make_engine
from .engines.specs import ALL_SPECS

logger = logging.getLogger(__name__)


def build_registry() -> EngineRegistry:
    # engines are cheap to build; instants are solved lazily on first query
    return EngineRegistry({name: make_engine(spec) for name, spec in ALL_SPECS.items()})


def install_default_registry() -> EngineRegistry:
    reg = build_registry()
    set_registry(reg)
    logger.debug("calendar engines: %s", ", ".join(reg.names()))
    return reg
