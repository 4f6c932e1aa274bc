"""Prototype pattern - objects produced by copying a template.

A ``Prototype`` carries three kinds of fields whose copy semantics differ:

- ``primitive``: an opaque scalar, carried over by value.
- ``component``: an owned reference object, shallow-copied so the clone
  gets its own instance.
- ``circular_reference``: a nested node holding a back-reference to the
  prototype that created it. The clone gets a fresh node that points at
  the clone, never at the original.
"""
from __future__ import annotations

import copy
from typing import Any

from creational_patterns.domain.core.exceptions import ValidationError


class ComponentWithBackReference:
    """Nested node holding a reference back to its owning prototype."""

    def __init__(self, prototype: "Prototype"):
        self.prototype = prototype

    def __repr__(self) -> str:
        return f"ComponentWithBackReference(prototype=<{type(self.prototype).__name__} at {id(self.prototype):#x}>)"


class Prototype:
    """
    Example class that has cloning ability.

    The prototype creates its back-reference node during construction,
    passing itself. ``clone()`` allocates the copy first and only then
    builds the copy's node around it, so the cycle never has to be patched.
    """

    def __init__(self, primitive: Any, component: Any):
        self.primitive = primitive
        self.component = component
        self.circular_reference = ComponentWithBackReference(self)

    @property
    def component(self) -> Any:
        return self._component

    @component.setter
    def component(self, value: Any) -> None:
        _ensure_clonable_component(value)
        self._component = value

    def clone(self) -> "Prototype":
        """
        Produce a copy of this prototype.

        Returns:
            A new prototype whose primitive equals this one's, whose component
            is a shallow copy of this one's, and whose back-reference node
            points at the new prototype.
        """
        cloned = self.__class__.__new__(self.__class__)
        # Subclass state is carried over as-is; the owned fields are replaced below
        _carry_over_state(self, cloned)
        cloned.component = copy.copy(self._component)
        cloned.circular_reference = ComponentWithBackReference(cloned)
        return cloned

    def __copy__(self) -> "Prototype":
        return self.clone()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(primitive={self.primitive!r}, component={self.component!r})"


def _carry_over_state(source: Prototype, target: Prototype) -> None:
    """Copy instance attributes by reference, including those kept in ``__slots__``."""
    target.__dict__.update(source.__dict__)
    for klass in type(source).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            try:
                value = getattr(source, name)
            except AttributeError:
                continue
            setattr(target, name, value)


def _ensure_clonable_component(component: Any) -> None:
    """Reject components the shallow copy protocol cannot turn into a distinct instance."""
    component_type = type(component).__name__
    try:
        duplicate = copy.copy(component)
    except (TypeError, copy.Error) as e:
        raise ValidationError(
            f"Component of type {component_type} cannot be copied: {e}",
            details={"component_type": component_type},
        ) from e
    if duplicate is component:
        raise ValidationError(
            f"Component of type {component_type} cannot be cloned into a distinct instance",
            details={"component_type": component_type},
        )
