import pytest

from creational_patterns.domain.factory_method import (
    ConcreteCreator1,
    ConcreteCreator2,
    ConcreteProduct1,
    ConcreteProduct2,
    Creator,
    Product,
    client_code,
)


@pytest.mark.parametrize(
    "creator_class, product_class",
    [(ConcreteCreator1, ConcreteProduct1), (ConcreteCreator2, ConcreteProduct2)],
)
def test_factory_method_returns_matching_product(creator_class, product_class):
    # Act
    product = creator_class().factory_method()

    # Assert
    assert isinstance(product, Product)
    assert type(product) is product_class


def test_some_operation_uses_factory_method_product():
    assert ConcreteCreator1().some_operation() == (
        "Creator: The same creator's code has just worked with ConcreteProduct1"
    )
    assert ConcreteCreator2().some_operation() == (
        "Creator: The same creator's code has just worked with ConcreteProduct2"
    )


def test_subclass_overriding_factory_method_changes_product():
    # Arrange
    class UpperProduct(Product):
        def operation(self) -> str:
            return "UPPER"

    class UpperCreator(Creator):
        def factory_method(self) -> Product:
            return UpperProduct()

    # Act & Assert
    assert UpperCreator().some_operation().endswith("worked with UPPER")


def test_creator_requires_factory_method():
    with pytest.raises(TypeError):
        Creator()


def test_client_code():
    assert client_code(ConcreteCreator2()) == [
        "Client: Creator class still works",
        "Creator: The same creator's code has just worked with ConcreteProduct2",
    ]
