import pytest

from creational_patterns.domain.core.exceptions import UnknownVariantError


def test_run_first_creator(factory_method_service):
    # Act
    report = factory_method_service.run_variant("1")

    # Assert
    assert report.variant == "1"
    assert report.creator == "ConcreteCreator1"
    assert report.product == "ConcreteProduct1"
    assert report.operation_result == "Creator: The same creator's code has just worked with ConcreteProduct1"
    assert report.messages == [
        "ConcreteCreator1",
        "Client: Creator class still works",
        "Creator: The same creator's code has just worked with ConcreteProduct1",
    ]


def test_run_all_creators(factory_method_service):
    # Act
    reports = factory_method_service.run()

    # Assert
    assert [report.creator for report in reports] == ["ConcreteCreator1", "ConcreteCreator2"]
    assert reports[1].product == "ConcreteProduct2"


def test_run_creator_by_alias(factory_method_service):
    assert factory_method_service.run(["second"])[0].creator == "ConcreteCreator2"


def test_unknown_creator(factory_method_service):
    with pytest.raises(UnknownVariantError, match="Unknown creator variant '3'"):
        factory_method_service.run_variant("3")
