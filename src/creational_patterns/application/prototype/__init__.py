"""Prototype application services."""

from .service import PrototypeApplicationService, inspect_clone

__all__ = ["PrototypeApplicationService", "inspect_clone"]
