"""Abstract Factory application services."""

from .service import AbstractFactoryApplicationService

__all__ = ["AbstractFactoryApplicationService"]
