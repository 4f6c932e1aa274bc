"""Factory Method domain."""

from .creators import (
    ConcreteCreator1,
    ConcreteCreator2,
    ConcreteProduct1,
    ConcreteProduct2,
    Creator,
    Product,
    client_code,
)

__all__ = [
    "ConcreteCreator1",
    "ConcreteCreator2",
    "ConcreteProduct1",
    "ConcreteProduct2",
    "Creator",
    "Product",
    "client_code",
]
