"""Abstract Factory domain."""

from .factories import AbstractFactory, ConcreteFactory1, ConcreteFactory2, client_code
from .products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)

__all__ = [
    "AbstractFactory",
    "AbstractProductA",
    "AbstractProductB",
    "ConcreteFactory1",
    "ConcreteFactory2",
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
    "client_code",
]
