"""Abstract Factory - produces families of related products.

The factory interface declares one creation method per product of the
family. Each concrete factory produces the products of a single variant, so
the products it returns are guaranteed to be compatible. Signatures return
the abstract product types while concrete products are instantiated inside.
"""
from abc import ABC, abstractmethod
from typing import List

from .products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)


class AbstractFactory(ABC):
    """Declares a set of methods returning the abstract products of a family."""

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        pass


class ConcreteFactory1(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


def client_code(factory: AbstractFactory) -> List[str]:
    """
    Work with a factory and its products only through the abstract types.

    Returns:
        The observations the client makes: product B's own result and
        product B collaborating with product A.
    """
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    return [
        product_b.useful_function_b(),
        product_b.another_useful_function_b(product_a),
    ]
