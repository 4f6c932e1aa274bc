"""Factory Method application services."""

from .service import FactoryMethodApplicationService

__all__ = ["FactoryMethodApplicationService"]
