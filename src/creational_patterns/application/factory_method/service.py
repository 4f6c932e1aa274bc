# src/creational_patterns/application/factory_method/service.py
from typing import List, Optional, Sequence

from creational_patterns.application.dto.reports import FactoryMethodReport
from creational_patterns.domain.factory_method.creators import Creator, client_code
from creational_patterns.infrastructure.logging.logger import get_logger
from creational_patterns.infrastructure.registry.creator_registry import CreatorRegistry, get_creator_registry


class FactoryMethodApplicationService:
    """Application service running the Factory Method client code."""

    def __init__(self, registry: Optional[CreatorRegistry] = None):
        self._registry = registry or get_creator_registry()
        self._logger = get_logger(__name__)

    def list_variants(self) -> List[str]:
        return self._registry.list_variants()

    def run_variant(self, variant: str) -> FactoryMethodReport:
        """
        Run the client code against one creator.

        Raises:
            UnknownVariantError: If no creator is registered under ``variant``
        """
        registration = self._registry.resolve(variant)
        creator: Creator = self._registry.create(registration.name)
        creator_name = type(creator).__name__

        observations = client_code(creator)

        self._logger.debug("Factory method client finished", variant=registration.name, creator=creator_name)

        return FactoryMethodReport(
            variant=registration.name,
            creator=creator_name,
            product=creator.factory_method().operation(),
            operation_result=observations[-1],
            messages=[creator_name] + observations,
        )

    def run(self, variants: Optional[Sequence[str]] = None) -> List[FactoryMethodReport]:
        """Run the client code against each named creator, or every registered one."""
        names = list(variants) if variants else self.list_variants()
        return [self.run_variant(name) for name in names]
