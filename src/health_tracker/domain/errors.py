"""Domain error types."""


class HealthTrackerError(Exception):
    """Base class for domain errors."""

    kind = "error"


class InvalidInputError(HealthTrackerError, ValueError):
    """Raised when a metric, goal or intake value is missing or out of range."""

    kind = "invalid_input"


class InvalidTargetError(InvalidInputError):
    """Raised when a target used as a percentage denominator is not positive."""

    kind = "invalid_target"


class NoProgramError(HealthTrackerError):
    """Raised when a day is logged before the user has saved a program."""

    kind = "no_program"
