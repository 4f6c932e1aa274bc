# src/creational_patterns/application/dto/reports.py
from typing import Any, List

from pydantic import Field

from .base import BaseDTO


class CloneReport(BaseDTO):
    """Observations made on a prototype and its clone."""

    primitive: Any = Field(description="Primitive value of the original prototype")
    primitive_carried_over: bool
    component_cloned: bool
    back_reference_linked_to_clone: bool
    back_reference_detached_from_original: bool
    messages: List[str] = Field(default_factory=list)

    @property
    def invariants_hold(self) -> bool:
        return (
            self.primitive_carried_over
            and self.component_cloned
            and self.back_reference_linked_to_clone
            and self.back_reference_detached_from_original
        )


class AbstractFactoryReport(BaseDTO):
    """Observations made by the client of one concrete factory."""

    variant: str
    factory: str
    product_a: str
    product_b: str
    collaboration: str
    messages: List[str] = Field(default_factory=list)


class FactoryMethodReport(BaseDTO):
    """Observations made by the client of one concrete creator."""

    variant: str
    creator: str
    product: str
    operation_result: str
    messages: List[str] = Field(default_factory=list)
