"""Error types raised by the risk engine and its data providers."""


class RiskEngineError(Exception):
    """Base class for all risk engine errors."""


class InvalidInputError(RiskEngineError, ValueError):
    """Input outside its documented domain (negative magnitude, unknown enum value)."""


class DataUnavailableError(RiskEngineError, LookupError):
    """A provider has no data for the requested region, loan, or analysis."""
