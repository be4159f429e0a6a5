from __future__ import annotations


class CSSFirstError(Exception):
    """Base class for recommendation engine errors."""


class InvalidInput(CSSFirstError):
    """A task description was empty or not a string."""


class DocumentationUnavailable(CSSFirstError):
    """Every documentation tier failed for one property."""

    def __init__(self, property_name: str, reason: str = ""):
        self.property_name = property_name
        message = f"Documentation unavailable for {property_name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CacheCorruption(CSSFirstError):
    """A cached payload could not be deserialized."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Cache entry {key!r} could not be deserialized")


class StructuredSourceError(CSSFirstError):
    """The structured documentation source answered with an unusable payload."""
