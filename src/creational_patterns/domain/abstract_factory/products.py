# src/creational_patterns/domain/abstract_factory/products.py
from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    """
    Base interface of the first product of a family.

    All variants of the product must implement this interface.
    """

    @abstractmethod
    def useful_function_a(self) -> str:
        pass


class AbstractProductB(ABC):
    """
    Base interface of the second product of a family.

    Products of one variant are able to collaborate with each other; proper
    interaction is only guaranteed between products of the same variant.
    """

    @abstractmethod
    def useful_function_b(self) -> str:
        """Product B is able to do its own thing."""
        pass

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """Collaborate with a product A created by the same factory."""
        pass


class ConcreteProductA1(AbstractProductA):
    def useful_function_a(self) -> str:
        return "Product A1"


class ConcreteProductA2(AbstractProductA):
    def useful_function_a(self) -> str:
        return "Product A2"


class ConcreteProductB1(AbstractProductB):
    def useful_function_b(self) -> str:
        return "Product B1"

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"Another useful product B1 collaborating with {result}"


class ConcreteProductB2(AbstractProductB):
    def useful_function_b(self) -> str:
        return "Product B2"

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"Another useful product B2 collaborating with {result}"
