import pytest

from creational_patterns.domain.abstract_factory import (
    AbstractFactory,
    AbstractProductA,
    AbstractProductB,
    ConcreteFactory1,
    ConcreteFactory2,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
    client_code,
)


class TestConcreteFactories:
    """Each factory produces products of its own variant only."""

    @pytest.mark.parametrize(
        "factory_class, product_a_class, product_b_class",
        [
            (ConcreteFactory1, ConcreteProductA1, ConcreteProductB1),
            (ConcreteFactory2, ConcreteProductA2, ConcreteProductB2),
        ],
    )
    def test_factory_creates_family(self, factory_class, product_a_class, product_b_class):
        factory = factory_class()

        product_a = factory.create_product_a()
        product_b = factory.create_product_b()

        assert isinstance(product_a, AbstractProductA)
        assert isinstance(product_b, AbstractProductB)
        assert type(product_a) is product_a_class
        assert type(product_b) is product_b_class

    def test_factory_creates_new_products_each_call(self):
        factory = ConcreteFactory1()

        assert factory.create_product_a() is not factory.create_product_a()

    def test_abstract_types_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            AbstractFactory()
        with pytest.raises(TypeError):
            AbstractProductA()
        with pytest.raises(TypeError):
            AbstractProductB()


class TestProducts:
    """Test product results and collaboration."""

    def test_product_results(self):
        assert ConcreteProductA1().useful_function_a() == "Product A1"
        assert ConcreteProductA2().useful_function_a() == "Product A2"
        assert ConcreteProductB1().useful_function_b() == "Product B1"
        assert ConcreteProductB2().useful_function_b() == "Product B2"

    def test_product_b_collaborates_with_any_product_a(self):
        product_b = ConcreteProductB2()

        result = product_b.another_useful_function_b(ConcreteProductA1())

        assert result == "Another useful product B2 collaborating with Product A1"


def test_client_code_with_first_factory():
    assert client_code(ConcreteFactory1()) == [
        "Product B1",
        "Another useful product B1 collaborating with Product A1",
    ]


def test_client_code_with_second_factory():
    assert client_code(ConcreteFactory2()) == [
        "Product B2",
        "Another useful product B2 collaborating with Product A2",
    ]
