"""Shared kernel for all pattern domains."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    UnknownVariantError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "UnknownVariantError",
    "ValidationError",
]
