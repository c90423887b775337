"""Exceptions raised by the Brick Breaker core."""


class BrickBreakerError(Exception):
    """Base class for Brick Breaker errors."""
    pass


class StageDataError(BrickBreakerError):
    """Raised when the packaged stage layouts are malformed."""
    pass
