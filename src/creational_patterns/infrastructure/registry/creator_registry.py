"""Creator Registry - concrete factory-method creators by variant name."""
from creational_patterns.domain.factory_method.creators import Creator

from .base_registry import BaseVariantRegistry


class CreatorRegistry(BaseVariantRegistry):
    """Registry of concrete ``Creator`` implementations."""

    kind = "creator"
    base_class = Creator

    def create(self, name: str) -> Creator:
        return super().create(name)


def get_creator_registry() -> CreatorRegistry:
    """Get the singleton creator registry instance."""
    return CreatorRegistry()
