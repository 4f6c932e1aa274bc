# src/creational_patterns/application/abstract_factory/service.py
from typing import List, Optional, Sequence

from creational_patterns.application.dto.reports import AbstractFactoryReport
from creational_patterns.domain.abstract_factory.factories import AbstractFactory, client_code
from creational_patterns.infrastructure.logging.logger import get_logger
from creational_patterns.infrastructure.registry.factory_registry import FactoryRegistry, get_factory_registry


class AbstractFactoryApplicationService:
    """Application service running the Abstract Factory client code."""

    def __init__(self, registry: Optional[FactoryRegistry] = None):
        self._registry = registry or get_factory_registry()
        self._logger = get_logger(__name__)

    def list_variants(self) -> List[str]:
        return self._registry.list_variants()

    def run_variant(self, variant: str) -> AbstractFactoryReport:
        """
        Run the client code against one factory.

        Raises:
            UnknownVariantError: If no factory is registered under ``variant``
        """
        registration = self._registry.resolve(variant)
        factory: AbstractFactory = self._registry.create(registration.name)
        label = registration.aliases[0] if registration.aliases else registration.name

        observations = client_code(factory)
        product_a = factory.create_product_a().useful_function_a()

        self._logger.debug("Abstract factory client finished", variant=registration.name,
                           factory=type(factory).__name__)

        return AbstractFactoryReport(
            variant=registration.name,
            factory=type(factory).__name__,
            product_a=product_a,
            product_b=observations[0],
            collaboration=observations[1],
            messages=[f"Client: Testing with {label} factory type..."] + observations,
        )

    def run(self, variants: Optional[Sequence[str]] = None) -> List[AbstractFactoryReport]:
        """Run the client code against each named factory, or every registered one."""
        names = list(variants) if variants else self.list_variants()
        return [self.run_variant(name) for name in names]
