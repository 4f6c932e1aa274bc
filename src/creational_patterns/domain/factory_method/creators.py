"""Factory Method - a method used for creating objects instead of a direct
constructor call.

Creation methods instantiate concrete classes but return them as objects of
the abstract ``Product`` type.
"""
from abc import ABC, abstractmethod
from typing import List


class Product(ABC):
    """Declares the operations all concrete products must implement."""

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteProduct1(Product):
    def operation(self) -> str:
        return "ConcreteProduct1"


class ConcreteProduct2(Product):
    def operation(self) -> str:
        return "ConcreteProduct2"


class Creator(ABC):
    """
    Declares the factory method returning a ``Product``.

    Despite the name, creating products is not the creator's primary
    responsibility: it usually holds business logic relying on the product
    the factory method returns.
    """

    @abstractmethod
    def factory_method(self) -> Product:
        pass

    def some_operation(self) -> str:
        product = self.factory_method()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()


def client_code(creator: Creator) -> List[str]:
    """Use a creator through the base interface only."""
    return [
        "Client: Creator class still works",
        creator.some_operation(),
    ]
