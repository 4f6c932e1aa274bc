"""Factory Registry - concrete abstract factories by variant name."""
from creational_patterns.domain.abstract_factory.factories import AbstractFactory

from .base_registry import BaseVariantRegistry


class FactoryRegistry(BaseVariantRegistry):
    """Registry of concrete ``AbstractFactory`` implementations."""

    kind = "factory"
    base_class = AbstractFactory

    def create(self, name: str) -> AbstractFactory:
        return super().create(name)


def get_factory_registry() -> FactoryRegistry:
    """Get the singleton factory registry instance."""
    return FactoryRegistry()
