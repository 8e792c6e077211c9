"""Exception types raised by the simulator."""


class PreflopOddsError(Exception):
    """Base class for all simulator errors."""


class InvalidArgument(PreflopOddsError, ValueError):
    """Malformed input, e.g. a bad trial count or sample size."""


class InvariantViolation(PreflopOddsError, RuntimeError):
    """Corrupted static data or a logic bug. Fatal for the run."""


class DivisionUndefined(PreflopOddsError, ZeroDivisionError):
    """A percentage was requested for a category with zero played trials."""
