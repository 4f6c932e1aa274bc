"""Data transfer objects returned by the application services."""

from .base import BaseDTO
from .reports import AbstractFactoryReport, CloneReport, FactoryMethodReport

__all__ = ["AbstractFactoryReport", "BaseDTO", "CloneReport", "FactoryMethodReport"]
