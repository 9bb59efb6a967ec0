"""Domain exception hierarchy for the event mock."""

from __future__ import annotations


class DomEventError(Exception):
    """Base class for all domain-level event errors."""


class InvalidArgumentError(DomEventError, TypeError):
    """Raised when a value has the wrong type or shape."""


class ReadOnlyPropertyError(InvalidArgumentError):
    """Raised when a read-only or write-once property is assigned."""


class ConfigValidationError(DomEventError):
    """Raised when configuration cannot be validated safely."""
