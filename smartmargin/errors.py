"""Exception types raised by the margining pipeline.

Each failure kind derives from the built-in exception it specialises, so
callers that only know about ``ValueError`` or ``RuntimeError`` keep working.
"""


class MarginError(Exception):
    """Base class for all errors raised by smartmargin."""

    pass


class ParseFailure(MarginError, ValueError):
    """Raised when a trade document or scenario snapshot cannot be read."""

    pass


class CalibrationFailure(MarginError, RuntimeError):
    """Raised when a curve cannot be fitted or a required curve is missing."""

    pass


class SimulationFailure(MarginError, ArithmeticError):
    """Raised when a Monte Carlo step produces a non-finite value."""

    pass


class InsufficientScenarioData(MarginError, ValueError):
    """Raised when fewer than two scenario dates survive filtering."""

    pass


class ScenarioNotFound(MarginError, LookupError):
    """Raised when no scenario is held for the requested market data date."""

    pass
