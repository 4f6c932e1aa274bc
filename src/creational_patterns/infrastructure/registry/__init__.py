"""Variant registries for the factory-based patterns."""

from .base_registry import BaseVariantRegistry, VariantRegistration
from .creator_registry import CreatorRegistry, get_creator_registry
from .factory_registry import FactoryRegistry, get_factory_registry
from .registration import register_default_variants

__all__ = [
    "BaseVariantRegistry",
    "CreatorRegistry",
    "FactoryRegistry",
    "VariantRegistration",
    "get_creator_registry",
    "get_factory_registry",
    "register_default_variants",
]
