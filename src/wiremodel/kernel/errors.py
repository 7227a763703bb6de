"""Exceptions raised while mapping responses onto models."""

from typing import Any


class WireModelError(Exception):
    """Base exception for wiremodel errors."""
    pass


class ConfigurationError(WireModelError):
    """Raised when the parser is wired up incorrectly."""
    pass


class UnregisteredLocationError(ConfigurationError, LookupError):
    """Raised when a schema references a location with no registered visitor.

    Never swallowed by the mapper: a skipped field would be indistinguishable
    from a field that is legitimately absent.
    """
    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No response visitor is registered for location '{location}'")


class UnsupportedModelTypeError(WireModelError, ValueError):
    """Raised when a response model is neither an object nor an array."""
    def __init__(self, model_type: Any):
        self.model_type = model_type
        super().__init__(f"{model_type} is not a supported response model type")


class ResponseDecodeError(WireModelError):
    """Raised when a response body cannot be decoded."""
    def __init__(self, content_type: str, reason: str):
        self.content_type = content_type
        self.reason = reason
        super().__init__(f"Unable to decode {content_type} body: {reason}")
