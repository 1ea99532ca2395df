from __future__ import annotations

from ..core.errors import EngineUnavailableError


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise EngineUnavailableError('Need numpy. Install: pip install "nongli[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise EngineUnavailableError('Need matplotlib. Install: pip install "nongli[diagnostics]"') from e


def _need_skyfield():
    try:
        from skyfield.api import load
        return load
    except ImportError as e:
        raise EngineUnavailableError('Need skyfield. Install: pip install "nongli[ephemeris]"') from e
