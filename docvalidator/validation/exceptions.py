class ValidatorError(Exception):
    """Base exception for all document validation errors."""


class InvalidImageError(ValidatorError):
    """Raised when the supplied image cannot be decoded into a pixel buffer."""


class SensorError(ValidatorError):
    """Raised when a vision sensor fails to produce an observation."""


class SensorCompletionError(SensorError):
    """Raised when a callback-style sensor never settles its result."""


class CategoryError(ValidatorError):
    """Raised for unknown, duplicate, or malformed document categories."""
