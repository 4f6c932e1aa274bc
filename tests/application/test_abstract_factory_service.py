import pytest

from creational_patterns.application.abstract_factory.service import AbstractFactoryApplicationService
from creational_patterns.domain.abstract_factory.factories import ConcreteFactory1
from creational_patterns.domain.core.exceptions import UnknownVariantError
from creational_patterns.infrastructure.registry.factory_registry import FactoryRegistry


class TestAbstractFactoryApplicationService:
    """Test running the abstract factory client through the service."""

    def test_run_first_variant(self, abstract_factory_service):
        report = abstract_factory_service.run_variant("1")

        assert report.variant == "1"
        assert report.factory == "ConcreteFactory1"
        assert report.product_a == "Product A1"
        assert report.product_b == "Product B1"
        assert report.collaboration == "Another useful product B1 collaborating with Product A1"
        assert report.messages == [
            "Client: Testing with first factory type...",
            "Product B1",
            "Another useful product B1 collaborating with Product A1",
        ]

    def test_run_variant_by_alias(self, abstract_factory_service):
        report = abstract_factory_service.run_variant("second")

        assert report.variant == "2"
        assert report.factory == "ConcreteFactory2"
        assert report.messages[0] == "Client: Testing with second factory type..."

    def test_run_all_variants_in_order(self, abstract_factory_service):
        reports = abstract_factory_service.run()

        assert [report.factory for report in reports] == ["ConcreteFactory1", "ConcreteFactory2"]

    def test_run_selected_variants(self, abstract_factory_service):
        reports = abstract_factory_service.run(["2"])

        assert [report.variant for report in reports] == ["2"]

    def test_unknown_variant(self, abstract_factory_service):
        with pytest.raises(UnknownVariantError) as exc_info:
            abstract_factory_service.run_variant("art-deco")

        assert exc_info.value.available == ["1", "2"]

    def test_variant_without_alias_uses_name_in_header(self):
        registry = FactoryRegistry()
        registry.register("modern", ConcreteFactory1)
        service = AbstractFactoryApplicationService(registry)

        report = service.run_variant("modern")

        assert report.messages[0] == "Client: Testing with modern factory type..."
        assert service.list_variants() == ["1", "2", "modern"]
