"""Exceptions raised by the kundali engine."""


class KundaliEngineError(Exception):
    """Base exception for all engine errors."""
    pass


class InvalidInstantError(KundaliEngineError, ValueError):
    """Raised when a date, time, timezone or angle cannot be turned into a finite instant."""
    pass


class DashaCycleError(KundaliEngineError, RuntimeError):
    """Raised when the mahadasha search runs past its cycle bound."""
    pass
