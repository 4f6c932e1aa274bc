"""Registration of the built-in pattern variants."""
from creational_patterns.domain.abstract_factory.factories import ConcreteFactory1, ConcreteFactory2
from creational_patterns.domain.factory_method.creators import ConcreteCreator1, ConcreteCreator2

from .base_registry import ensure_registered
from .creator_registry import get_creator_registry
from .factory_registry import get_factory_registry


def register_default_variants() -> None:
    """Register the built-in factories and creators. Safe to call repeatedly."""
    factories = get_factory_registry()
    ensure_registered(factories, "1", ConcreteFactory1, aliases=["first"])
    ensure_registered(factories, "2", ConcreteFactory2, aliases=["second"])

    creators = get_creator_registry()
    ensure_registered(creators, "1", ConcreteCreator1, aliases=["first"])
    ensure_registered(creators, "2", ConcreteCreator2, aliases=["second"])
