# src/creational_patterns/domain/core/exceptions.py
from typing import Any, List, Optional, Sequence


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnknownVariantError(DomainException):
    """Raised when a factory or creator variant is not registered."""
    def __init__(self, kind: str, name: str, available: Sequence[str] = ()):
        known = ", ".join(available) if available else "none"
        super().__init__(f"Unknown {kind} variant '{name}'. Available variants: {known}")
        self.kind = kind
        self.name = name
        self.available = list(available)


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
