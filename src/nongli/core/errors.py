class NongliError(Exception):
    """Base error."""

class OutOfRangeError(NongliError, ValueError):
    """Raised when a date or lunar year lies outside the engine's coverage window."""

class InvalidLunarDateError(NongliError, ValueError):
    """Raised when a lunar date cannot exist (bad leap flag, day past month end, ...)."""

class EngineUnavailableError(NongliError):
    """Raised when an optional extra (e.g. skyfield) is not installed."""
