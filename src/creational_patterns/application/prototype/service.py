# src/creational_patterns/application/prototype/service.py
from datetime import datetime
from typing import Any, Optional

from creational_patterns.application.dto.reports import CloneReport
from creational_patterns.config.schemas.demo_schema import PrototypeDemoConfig
from creational_patterns.domain.prototype.prototype import Prototype
from creational_patterns.infrastructure.logging.logger import get_logger

_UNSET = object()


def inspect_clone(original: Prototype, clone: Prototype) -> CloneReport:
    """
    Compare a prototype with its clone.

    Returns:
        A report of the primitive equality, component identity and
        back-reference target checks, with the matching console lines.
    """
    primitive_carried_over = original.primitive == clone.primitive
    component_cloned = clone.component is not original.component
    back_reference_target = clone.circular_reference.prototype
    linked_to_clone = back_reference_target is clone
    detached_from_original = back_reference_target is not original

    messages = [
        "Primitive fields have been carried over to clone."
        if primitive_carried_over
        else "Primitive values have not been carried over.",
        "Simple component has been cloned."
        if component_cloned
        else "Simple component has not been cloned.",
        "Component with back ref is linked to clone."
        if linked_to_clone and detached_from_original
        else "Component with back ref is linked to original object.",
    ]

    return CloneReport(
        primitive=original.primitive,
        primitive_carried_over=primitive_carried_over,
        component_cloned=component_cloned,
        back_reference_linked_to_clone=linked_to_clone,
        back_reference_detached_from_original=detached_from_original,
        messages=messages,
    )


class PrototypeApplicationService:
    """Application service running the Prototype client code."""

    def __init__(self, config: Optional[PrototypeDemoConfig] = None):
        self._config = config or PrototypeDemoConfig()
        self._logger = get_logger(__name__)

    def create_prototype(self, primitive: Any = _UNSET, component: Any = _UNSET) -> Prototype:
        """Build a prototype; defaults to the configured primitive and the current time."""
        if primitive is _UNSET:
            primitive = self._config.primitive
        if component is _UNSET:
            component = datetime.now()
        return Prototype(primitive, component)

    def clone(self, prototype: Prototype) -> Prototype:
        return prototype.clone()

    def run_demo(self, primitive: Any = _UNSET) -> CloneReport:
        """Create a prototype, clone it and report what the clone carries over."""
        original = self.create_prototype(primitive)
        cloned = self.clone(original)
        report = inspect_clone(original, cloned)

        self._logger.debug(
            "Prototype demo finished",
            primitive=original.primitive,
            invariants_hold=report.invariants_hold,
        )
        return report
